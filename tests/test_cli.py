"""Tests for the neonstag command line."""

import pytest

from neonstag.cli import build_parser, main, options_from_args

from conftest import SIMPLE_SVG
from svg_helpers import clones, filters, local, parse


@pytest.fixture
def svg_file(tmp_path):
    path = tmp_path / 'logo.svg'
    path.write_text(SIMPLE_SVG, encoding='utf-8')
    return path


class TestOptionsFromArgs:

    def test_defaults(self, svg_file):
        options = options_from_args(build_parser().parse_args([str(svg_file)]))
        assert options.color == '#00ffd5'
        assert options.preserve_fill is True

    def test_preset_and_overrides(self, svg_file):
        args = build_parser().parse_args([
            str(svg_file), '--preset', 'amber', '--intensity', '12', '--multi-color',
            '--no-preserve-fill', '--no-scale-aware', '--mid-color', '#00aeff',
        ])
        options = options_from_args(args)
        assert options.color == '#ffbf00'
        assert options.intensity == 12
        assert options.multi_color is True
        assert options.preserve_fill is False
        assert options.scale_aware is False
        assert options.mid_color == '#00aeff'

    def test_explicit_color_wins_over_preset(self, svg_file):
        args = build_parser().parse_args([str(svg_file), '--preset', 'lime', '--color', '#123456'])
        assert options_from_args(args).color == '#123456'


class TestMain:

    def test_stdout(self, svg_file, capsys):
        assert main([str(svg_file)]) == 0
        out = capsys.readouterr().out
        root = parse(out)
        assert len(clones(root)) == 1
        assert len(filters(root)) == 1

    def test_output_file(self, svg_file, tmp_path, capsys):
        target = tmp_path / 'out.svg'
        assert main([str(svg_file), '-o', str(target), '--color', '#ff00d0']) == 0
        (clone,) = clones(parse(target.read_text(encoding='utf-8')))
        assert clone.get('stroke') == '#ff00d0'
        assert capsys.readouterr().out == ''

    def test_export(self, svg_file, capsys):
        assert main([
            str(svg_file), '--export-width', '640', '--export-height', '480', '--background', '#111',
        ]) == 0
        root = parse(capsys.readouterr().out)
        assert root.get('viewBox') == '0 0 640 480'
        assert [local(child) for child in root] == ['rect', 'svg']

    def test_warnings_on_stderr(self, tmp_path, capsys):
        path = tmp_path / 'styled.svg'
        path.write_text('<svg xmlns="http://www.w3.org/2000/svg"><style/><rect/></svg>', encoding='utf-8')
        assert main([str(path)]) == 0
        assert 'Warning: SVG contains <style>' in capsys.readouterr().err

    def test_quiet(self, tmp_path, capsys):
        path = tmp_path / 'styled.svg'
        path.write_text('<svg xmlns="http://www.w3.org/2000/svg"><style/><rect/></svg>', encoding='utf-8')
        assert main([str(path), '-q']) == 0
        assert 'Warning' not in capsys.readouterr().err

    def test_malformed(self, tmp_path, capsys):
        path = tmp_path / 'broken.svg'
        path.write_text('<svg><rect></svg>', encoding='utf-8')
        assert main([str(path)]) == 1
        assert 'Error: Invalid SVG file' in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / 'missing.svg')]) == 1
        assert 'Error:' in capsys.readouterr().err

    def test_unknown_preset(self, svg_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(svg_file), '--preset', 'pink'])
        assert exc_info.value.code == 2
        assert 'Unknown preset: pink' in capsys.readouterr().err

    def test_half_export_size(self, svg_file):
        with pytest.raises(SystemExit):
            main([str(svg_file), '--export-width', '640'])

    @pytest.mark.parametrize("flag,value", [('--background', '#111'), ('--background-image', 'bg.png')])
    def test_background_needs_export_size(self, svg_file, capsys, flag, value):
        with pytest.raises(SystemExit) as exc_info:
            main([str(svg_file), flag, value])
        assert exc_info.value.code == 2
        assert 'require --export-width and --export-height' in capsys.readouterr().err
