import io

import pytest
from rich.console import Console

from codedigest.cli import build_parser, main, run
from codedigest.core.config import AppConfig


def make_config(*argv):
    return AppConfig.from_args(build_parser().parse_args(list(argv)))


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200)


def test_run_with_tree_and_python_mapping(tmp_path, console):
    (tmp_path / 'pkg').mkdir()
    (tmp_path / 'pkg' / 'tool.py').write_text('import os\n\n\ndef run():\n    return os.getcwd()\n')
    (tmp_path / 'pkg' / 'main.go').write_text('package main\n\nfunc main() {\n\trun()\n}\n')
    out = []
    code = run(make_config(str(tmp_path), '--tree', '-x', 'py=python'), console, out.append)
    assert code == 0
    assert out[0] == '.\n└── pkg\n    ├── main.go\n    └── tool.py\n'
    text = '\n'.join(out[1:])
    assert '```go\nfunc main() {\n\t// ...\n}\n```' in text
    assert '```python\nimport os\n\ndef run(): {\n    # ...\n}\n```' in text


def test_run_without_python_mapping_skips_python(tmp_path, console):
    (tmp_path / 'tool.py').write_text('import os\n')
    out = []
    assert run(make_config(str(tmp_path)), console, out.append) == 0
    assert out == []


def test_run_rejects_missing_directory(tmp_path, console):
    assert run(make_config(str(tmp_path / 'missing')), console, print) == 1
    assert 'Not a directory' in console.file.getvalue()


def test_main_exits_with_run_status(tmp_path, capsys):
    (tmp_path / 'lib.rs').write_text('pub struct Unit;\n')
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path), '--quiet'])
    assert exc_info.value.code == 0
    assert 'pub struct Unit;' in capsys.readouterr().out


def test_main_rejects_bad_extension_mapping(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path), '-x', 'py'])
    assert exc_info.value.code == 2
