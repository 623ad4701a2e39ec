"""Tests for the tiling command line."""

import io

import pandas as pd

from src.tiling import cli


class TestCli:
    """Test suite for the tile listing command."""

    def test_lists_tiles_as_csv(self, capsys):
        """Test that the enumerated tiles are printed as CSV."""
        code = cli.main([
            "--bounds", "0", "0", "4", "4",
            "--tile-size", "1",
            "--query", "1.2", "1.2", "2.5", "1.8",
        ])

        assert code == 0
        df = pd.read_csv(io.StringIO(capsys.readouterr().out))
        assert df['tile_id'].tolist() == [5, 6]

    def test_config_file_with_override(self, tmp_path, capsys):
        """Test that flags override values from the YAML file."""
        config_path = tmp_path / "grid.yaml"
        config_path.write_text(
            "bounds: [0.0, 0.0, 4.0, 4.0]\n"
            "tile_size: 2.0\n"
            "max_tiles: 0\n",
            encoding="utf-8",
        )

        code = cli.main([
            "--config", str(config_path),
            "--tile-size", "1",
            "--max-tiles", "1",
            "--query", "1", "1", "2", "2",
        ])

        assert code == 0
        df = pd.read_csv(io.StringIO(capsys.readouterr().out))
        assert df['tile_id'].tolist() == [5]

    def test_invalid_tile_size(self, capsys):
        """Test that a non-positive tile size returns an error code."""
        code = cli.main([
            "--bounds", "0", "0", "4", "4",
            "--tile-size", "0",
            "--query", "1", "1", "2", "2",
        ])

        assert code == 1
        assert capsys.readouterr().out == ""

    def test_missing_config(self, tmp_path):
        """Test that a missing configuration file is reported."""
        code = cli.main([
            "--config", str(tmp_path / "missing.yaml"),
            "--query", "1", "1", "2", "2",
        ])

        assert code == 1

    def test_missing_grid_definition(self):
        """Test that bounds and tile size are required."""
        code = cli.main(["--query", "1", "1", "2", "2"])

        assert code == 1

    def _write_config(self, tmp_path, text):
        path = tmp_path / "grid.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)

    def test_malformed_yaml(self, tmp_path, capsys):
        """Test that a YAML syntax error returns an error code."""
        path = self._write_config(tmp_path, "bounds: [0, 1\ntile_size: 1\n")

        assert cli.main(["--config", path, "--query", "1", "1", "2", "2"]) == 1
        assert capsys.readouterr().out == ""

    def test_non_mapping_config(self, tmp_path):
        """Test that a YAML list at the root returns an error code."""
        path = self._write_config(tmp_path, "- 1\n- 2\n")

        assert cli.main(["--config", path, "--query", "1", "1", "2", "2"]) == 1

    def test_scalar_bounds(self, tmp_path):
        """Test that bounds given as a single number return an error code."""
        path = self._write_config(tmp_path, "bounds: 5\ntile_size: 1\n")

        assert cli.main(["--config", path, "--query", "1", "1", "2", "2"]) == 1

    def test_list_tile_size(self, tmp_path):
        """Test that a list-valued tile size returns an error code."""
        path = self._write_config(tmp_path, "bounds: [0, 0, 4, 4]\ntile_size: [1, 2]\n")

        assert cli.main(["--config", path, "--query", "1", "1", "2", "2"]) == 1
