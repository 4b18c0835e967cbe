"""Tests for reading SVG files and uploads."""

import pytest

from neonstag import UnsupportedFileError, decode_svg_upload, read_svg_file
from neonstag.ingest import is_svg_upload

from conftest import SIMPLE_SVG


class TestIsSvgUpload:

    @pytest.mark.parametrize("content_type,filename", [
        ('image/svg+xml', None),
        ('image/svg+xml; charset=utf-8', None),
        ('IMAGE/SVG+XML', None),
        (None, 'logo.svg'),
        ('application/octet-stream', 'LOGO.SVG'),
        ('', 'drawing.svg'),
    ])
    def test_accepted(self, content_type, filename):
        assert is_svg_upload(content_type, filename)

    @pytest.mark.parametrize("content_type,filename", [
        ('image/png', 'logo.png'),
        ('text/plain', None),
        (None, 'logo.svgz'),
        (None, None),
    ])
    def test_rejected(self, content_type, filename):
        assert not is_svg_upload(content_type, filename)


class TestDecodeUpload:

    def test_decode(self):
        assert decode_svg_upload(SIMPLE_SVG.encode('utf-8'), 'image/svg+xml') == SIMPLE_SVG

    def test_byte_order_mark_removed(self):
        data = b'\xef\xbb\xbf' + SIMPLE_SVG.encode('utf-8')
        assert decode_svg_upload(data, filename='a.svg') == SIMPLE_SVG

    def test_wrong_type(self):
        with pytest.raises(UnsupportedFileError, match='Please upload a valid SVG file'):
            decode_svg_upload(b'\x89PNG', 'image/png', 'photo.png')

    def test_not_utf8(self):
        with pytest.raises(UnsupportedFileError, match='Failed to read the file'):
            decode_svg_upload(b'\xff\xfe\x00<', 'image/svg+xml')


class TestReadSvgFile:

    def test_read(self, tmp_path):
        path = tmp_path / 'logo.svg'
        path.write_text(SIMPLE_SVG, encoding='utf-8')
        assert read_svg_file(path) == SIMPLE_SVG
        assert read_svg_file(str(path)) == SIMPLE_SVG

    def test_wrong_extension(self, tmp_path):
        path = tmp_path / 'logo.txt'
        path.write_text(SIMPLE_SVG, encoding='utf-8')
        with pytest.raises(UnsupportedFileError):
            read_svg_file(path)

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_svg_file(tmp_path / 'missing.svg')
