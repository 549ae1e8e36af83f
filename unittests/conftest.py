import pytest

from vchain import defaults
from vchain.locale import registry


@pytest.fixture(autouse=True)
def restore_defaults():
    """
    Every test starts with the "default" locale and the built-in patterns, independent of the environment.
    Changes of the process-wide defaults and of the locale registry must not leak into other tests.
    """
    locale, options = defaults.defaults.locale, defaults.defaults.options
    registered = dict(registry._registry)  # pylint: disable=protected-access
    defaults.set_locale("default")
    defaults.set_options(None)
    yield
    defaults.defaults.locale, defaults.defaults.options = locale, options
    registry._registry.clear()  # pylint: disable=protected-access
    registry._registry.update(registered)  # pylint: disable=protected-access
