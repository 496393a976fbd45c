import pytest
from fastapi import FastAPI

from maven_essentials.boot.definition import ApplicationDefinition
from maven_essentials.core.arguments import ApplicationArguments
from maven_essentials.core.config import Settings
from maven_essentials.core.errors import ComponentNotFoundError
from maven_essentials.di import ApplicationContainer, BaseContainer


class _Service:
    pass


def test_singleton_is_returned_as_registered():
    container = BaseContainer()
    service = _Service()
    container.register_singleton(_Service, service)
    container.register_singleton("greeting", "hello")

    assert container.get(_Service) is service
    assert container.get("greeting") == "hello"
    assert container.contains(_Service)


def test_factory_is_called_on_every_lookup():
    container = BaseContainer()
    container.register_factory(_Service, _Service)

    first = container.get(_Service)
    second = container.get(_Service)

    assert isinstance(first, _Service)
    assert first is not second


def test_missing_registration_raises():
    container = BaseContainer()

    with pytest.raises(ComponentNotFoundError, match="_Service"):
        container.get(_Service)
    with pytest.raises(ComponentNotFoundError, match="missing"):
        container.get("missing")
    assert not container.contains("missing")


def test_application_container_wires_configuration_and_web(definition):
    arguments = ApplicationArguments(["--server.port=0"])
    settings = Settings(overrides=arguments.as_properties())

    container = ApplicationContainer(definition, arguments, settings)

    assert container.get(ApplicationDefinition) is definition
    assert container.get(ApplicationArguments) is arguments
    assert container.get(Settings) is settings
    app = container.get(FastAPI)
    assert app.title == definition.title
    assert app.state.container is container
