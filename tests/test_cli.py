import io

from tinydatalog.cli import main


def _run(argv, stdin=""):
    out = io.StringIO()
    code = main(argv, inp=io.StringIO(stdin), out=out)
    return code, out.getvalue()


def test_file_only_prints_saturated_facts(star_wars_path):
    code, out = _run([star_wars_path])
    assert code == 0
    assert out.startswith(f"...loaded file {star_wars_path} successfully.")
    assert "father(anakin, luke).\n" in out
    assert "grandparent(shmi, luke).\n" in out


def test_query_flag(star_wars_path):
    code, out = _run([star_wars_path, "-q", "father(X, luke)"])
    assert code == 0
    lines = out.splitlines()
    assert "{X = vader}" in lines
    assert "{X = anakin}" in lines


def test_query_without_answers():
    code, out = _run(["--query", "p(X)"])
    assert code == 0
    assert out.strip() == "<no answers>"


def test_repl_ingests_and_answers():
    code, out = _run([], stdin="p(a).\nq(X) :- p(X).\n\nq(X)\n")
    assert code == 0
    assert out.splitlines() == ["{X = a}", "goodbye!"]


def test_repl_reports_errors_and_continues():
    code, out = _run([], stdin="quit\np(a).\n?- p(a).\n")
    assert code == 0
    lines = out.splitlines()
    assert lines[0] == "hint: use control-d to leave"
    assert lines[1].startswith("<repl:1>: ")
    assert lines[-2:] == ["{}", "goodbye!"]


def test_missing_file_fails(tmp_path, capsys):
    code, _ = _run([str(tmp_path / "missing.datalog")])
    assert code == 1
    assert "missing.datalog" in capsys.readouterr().err


def test_bad_query_fails(capsys):
    code, _ = _run(["-q", "p("])
    assert code == 1
    assert "--query" in capsys.readouterr().err


def test_query_and_repl_conflict(capsys):
    code, _ = _run(["-q", "p(X)", "-r"])
    assert code == 2
