import pytest

# The following code allows custom flags when running pytest, eg. to include the slower whole grid tests
def pytest_addoption(parser):
    parser.addoption(
        "--slowtest", action="store_true", default=False, help="run slow tests on larger grids"
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slowtest: add --slowtest to run")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--slowtest"):
        # --slowtest given in cli: do not skip slow tests
        return
    skip_slow = pytest.mark.skip(reason="need --slowtest option to run")
    for item in items:
        if "slowtest" in item.keywords:
            item.add_marker(skip_slow)
