"""Tests for the jsbind command line."""

import shutil

from jsbind.cli import main
from conftest import FIXTURES_DIR


def copy_fixture(name, tmp_path):
    target = tmp_path / name
    shutil.copyfile(FIXTURES_DIR / name, target)
    return target


def test_no_files_is_usage_error(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert 'Please provide at least one bindings file' in captured.err


def test_writes_output_next_to_input(tmp_path, capsys):
    source = copy_fixture('Element.cs', tmp_path)
    assert main([str(source)]) == 0

    output = tmp_path / 'Element.g.cs'
    expected = (FIXTURES_DIR / 'Element.expected.cs').read_text(encoding='utf-8')
    assert output.read_text(encoding='utf-8') == expected
    assert f'{source} => {output}' in capsys.readouterr().out


def test_files_processed_in_order(tmp_path, capsys):
    first = copy_fixture('Console.cs', tmp_path)
    second = copy_fixture('Element.cs', tmp_path)
    assert main([str(first), str(second)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        f'{first} => {tmp_path / "Console.g.cs"}',
        f'{second} => {tmp_path / "Element.g.cs"}',
    ]


def test_property_accessors_flag(tmp_path):
    source = copy_fixture('Browser.cs', tmp_path)
    assert main(['--property-accessors', str(source)]) == 0
    code = (tmp_path / 'Browser.g.cs').read_text(encoding='utf-8')
    assert 'get => _js.GetObjectProperty<string>(nameof(id));' in code


def test_error_leaves_no_output(tmp_path, capsys):
    good = copy_fixture('Console.cs', tmp_path)
    bad = tmp_path / 'Bad.cs'
    bad.write_text('interface Foo : JSGlobalObject, OtherMarker { }\n', encoding='utf-8')

    assert main([str(good), str(bad)]) == 1

    assert (tmp_path / 'Console.g.cs').exists()
    assert not (tmp_path / 'Bad.g.cs').exists()
    err = capsys.readouterr().err
    assert f'{bad}(1, 0): Expected interface Foo to have only 1 base interface.' in err


def test_missing_input_file(tmp_path, capsys):
    assert main([str(tmp_path / 'Nope.cs')]) == 1
    assert 'Nope.cs' in capsys.readouterr().err


def test_byte_order_mark_is_ignored(tmp_path):
    source = tmp_path / 'Console.cs'
    source.write_bytes(b'\xef\xbb\xbf' + (FIXTURES_DIR / 'Console.cs').read_bytes())
    assert main([str(source)]) == 0
    expected = (FIXTURES_DIR / 'Console.expected.cs').read_text(encoding='utf-8')
    assert (tmp_path / 'Console.g.cs').read_text(encoding='utf-8') == expected


def test_non_utf8_input(tmp_path, capsys):
    source = tmp_path / 'Binary.cs'
    source.write_bytes(b'interface a : JSObjectWrapper { }\xff\xfe\n')
    assert main([str(source)]) == 1
    assert f'ERROR: {source}: not a UTF-8 text file' in capsys.readouterr().err
    assert not (tmp_path / 'Binary.g.cs').exists()
