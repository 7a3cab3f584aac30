"""
Shared pytest fixtures for circlelayout tests
"""
import pytest
import matplotlib

# Headless rendering for visualizer and plot CLI tests
matplotlib.use("Agg")

from circlelayout.layout import Child, DisplayArea, LayoutParams


@pytest.fixture
def square_area() -> DisplayArea:
    """200x200 display area at the origin"""
    return DisplayArea(0, 0, 200, 200)


@pytest.fixture
def four_children():
    """Four equal 20x20 children"""
    return [Child(name, 20, 20) for name in ('a', 'b', 'c', 'd')]


@pytest.fixture
def hub_children():
    """A large 'hub' child followed by three small ones"""
    return [
        Child('hub', 50, 50),
        Child('a', 20, 20),
        Child('b', 20, 20),
        Child('c', 20, 20),
    ]


@pytest.fixture
def default_params() -> LayoutParams:
    return LayoutParams()


@pytest.fixture
def child_table(tmp_path):
    """
    Child table with an unnamed child, an invisible child and a gone child
    """
    table = tmp_path / "children.tsv"
    table.write_text(
        "id\twidth\theight\tvisibility\n"
        "hub\t60\t60\tvisible\n"
        "a\t20\t20\tvisible\n"
        "b\t30\t20\tinvisible\n"
        "\t20\t20\t\n"
        "c\t20\t40\tgone\n"
    )
    return table


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Tests running the CLI, readers, writers and renderer"
    )
    config.addinivalue_line(
        "markers", "scenarios: Worked layout examples with exact expected placements"
    )
