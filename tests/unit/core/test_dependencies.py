import pytest

from netviz.core.dependencies import DependencyContainer


def test_missing_dependency_raises_import_error():
    container = DependencyContainer()
    container.register("nope", "netviz_module_that_does_not_exist")
    assert container.is_available("nope") is False
    with pytest.raises(ImportError):
        container.get("nope")


def test_unknown_dependency():
    with pytest.raises(KeyError):
        DependencyContainer().get("unregistered")


def test_available_dependency_is_cached():
    container = DependencyContainer()
    container.register("json", "json")
    assert container.get("json") is container.get("json")


def test_error_names_feature():
    container = DependencyContainer()
    container.register("nope", "netviz_module_that_does_not_exist")
    with pytest.raises(ImportError, match="chart rendering"):
        container.get("nope", feature="chart rendering")
