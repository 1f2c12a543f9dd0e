# text_transformation/shared/container.py
from dependency_injector import containers, providers

from text_transformation.shared.config import settings
from text_transformation.adapters.persistence.config_loader import ConfigLoader
from text_transformation.core.services.text_normalizer import TextNormalizer
from text_transformation.core.services.filename_generator import FilenameGenerator
from text_transformation.core.services.transformation_engine import TransformationEngine


def _load_transformation_config(loader: ConfigLoader, path: str):
    # The loader caches per path, so every call returns the same instance.
    return loader.load(path)


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    One ConfigLoader per container owns the cached configuration; every
    consumer receives that configuration instead of reaching for a global.
    """

    # 1. Configuration
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)
    config_loader = providers.Singleton(ConfigLoader)

    transformation_config = providers.Callable(
        _load_transformation_config,
        loader=config_loader,
        path=config.TRANSFORMATION_CONFIG_PATH,
    )

    # 3. Services (stateless apart from the shared configuration)
    text_normalizer = providers.Singleton(
        TextNormalizer,
        config=transformation_config,
    )

    filename_generator = providers.Singleton(
        FilenameGenerator,
        config=transformation_config,
    )

    transformation_engine = providers.Singleton(
        TransformationEngine,
        config=transformation_config,
        text_normalizer=text_normalizer,
        filename_generator=filename_generator,
    )


def build_container(config_path: str = None) -> Container:
    """
    Create a container, optionally pointing it at a specific configuration file.
    Loads the configuration immediately when EAGER_LOAD_CONFIG is set.
    """
    container = Container()
    if config_path:
        container.config.TRANSFORMATION_CONFIG_PATH.from_value(config_path)
    if container.config.EAGER_LOAD_CONFIG():
        container.transformation_config()
    return container
