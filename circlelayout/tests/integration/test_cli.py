"""
Integration tests for the command-line interface

Runs the subcommands programmatically with argparse namespaces, the way
the console script would.
"""
import sys
from argparse import Namespace

import pandas as pd
import pytest

from circlelayout.__main__ import main
from circlelayout.cli import layout, plot
from circlelayout.cli.common import build_container
from circlelayout.config import LayoutConfig
from circlelayout.layout import Direction, LayoutStrategy
from circlelayout.exceptions import ConfigurationError

pytestmark = pytest.mark.integration


def layout_args(children, **overrides):
    """Namespace matching what argparse creates for the layout flags"""
    values = dict(
        children=str(children),
        width=200.0,
        height=200.0,
        padding=[0.0],
        angle=0.0,
        angle_offset=0.0,
        radius=0.0,
        radius_mode='fits_largest_child',
        direction='counterclockwise',
        center=None,
        strategy='circular',
        output=None,
        debug=False,
    )
    values.update(overrides)
    return Namespace(**values)


class TestLayoutCommand:
    """Tests for the layout subcommand"""

    def test_default_output_next_to_input(self, child_table):
        output = layout.run(layout_args(child_table))
        assert output == child_table.parent / "children.placements.tsv"
        assert output.exists()

    def test_center_and_placements(self, child_table, tmp_path):
        output = layout.run(layout_args(child_table, center='hub', output=str(tmp_path / "p.tsv")))
        table = pd.read_csv(output, sep='\t')

        assert table['is_center'].tolist() == [True, False, False, False]
        assert table.loc[1, 'x'] == pytest.approx(185.0)
        assert table.loc[2, 'x'] == pytest.approx(57.5)
        assert table.loc[2, 'y'] == pytest.approx(26.388, abs=1e-3)

    def test_fixed_radius_and_padding(self, child_table, tmp_path):
        args = layout_args(child_table, radius=50.0, padding=[10.0, 10.0, 10.0, 10.0],
                           width=220.0, height=220.0, output=str(tmp_path / "p.tsv"))
        table = pd.read_csv(layout.run(args), sep='\t')
        assert table['radius'].tolist() == [50.0, 50.0, 50.0, 50.0]
        assert table.loc[0, 'x'] == pytest.approx(160.0)

    def test_unknown_center(self, child_table):
        with pytest.raises(ConfigurationError):
            layout.run(layout_args(child_table, center='ghost'))

    def test_missing_children_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            layout.run(layout_args(tmp_path / "missing.tsv"))


class TestPlotCommand:
    """Tests for the plot subcommand"""

    def test_writes_png(self, child_table, tmp_path):
        args = layout_args(child_table, center='hub', strategy='oval',
                           output=str(tmp_path / "preview.png"), preset='debug', dpi=40, title=None)
        output = plot.run(args)
        assert output.exists()
        assert output.read_bytes()[:8] == b'\x89PNG\r\n\x1a\n'

    def test_default_output_name(self, child_table):
        args = layout_args(child_table, preset='default', dpi=40, title='preview')
        assert plot.run(args) == child_table.parent / "children.layout.png"


class TestBuildContainer:
    """Tests for the shared container setup"""

    def test_layout_config_drives_params(self, child_table):
        config = LayoutConfig(strategy='oval', direction='clockwise', center_id='hub')
        container, _ = build_container(layout_args(child_table), config)

        assert container.params.strategy is LayoutStrategy.OVAL
        assert container.params.direction is Direction.CLOCKWISE
        assert container.last_result.center_placement.child_id == 'hub'

    def test_defaults_to_args(self, child_table):
        container, children = build_container(layout_args(child_table, center='hub'))
        assert container.params.center_id == 'hub'
        assert len(children) == 5


class TestMain:
    """Tests for the argparse entry point"""

    def test_no_command_exits(self, monkeypatch):
        monkeypatch.setattr(sys, 'argv', ['circlelayout'])
        with pytest.raises(SystemExit) as excinfo:
            main()
        assert excinfo.value.code == 1

    def test_layout_from_argv(self, monkeypatch, child_table, tmp_path):
        output = tmp_path / "argv.tsv"
        monkeypatch.setattr(sys, 'argv', [
            'circlelayout', 'layout',
            '--children', str(child_table),
            '--width', '200', '--height', '200',
            '--angle-offset', '90', '--direction', 'clockwise',
            '--output', str(output),
        ])
        main()
        table = pd.read_csv(output, sep='\t')
        assert table.loc[0, 'id'] == 'hub'
        assert table.loc[0, 'y'] == pytest.approx(30.0)
