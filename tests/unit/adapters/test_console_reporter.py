import io
from ortooverlap.adapters.console_reporter import ConsoleReporter, MemoryReporter

def test_console_tags_and_streams():
    out, err = io.StringIO(), io.StringIO()
    r = ConsoleReporter(out=out, err=err)
    r.report("hola"); r.ok("listo"); r.warn("ojo"); r.error("mal")
    assert out.getvalue().splitlines() == ["[INFO] hola", "[OK] listo", "[WARN] ojo"]
    assert err.getvalue().splitlines() == ["[ERROR] mal"]

def test_quiet_keeps_warnings_and_errors():
    out, err = io.StringIO(), io.StringIO()
    r = ConsoleReporter(out=out, err=err, quiet=True)
    r.report("x"); r.ok("y"); r.warn("w"); r.error("e")
    assert out.getvalue() == "[WARN] w\n"
    assert err.getvalue() == "[ERROR] e\n"

def test_memory_reporter_filters():
    r = MemoryReporter()
    r.report("a"); r.error("b")
    assert r.messages() == ["a", "b"]
    assert r.messages("ERROR") == ["b"]
