import io

from port_sniffer.report import format_report, print_report


def test_format_report_sorts_and_dedupes():
    assert format_report([8080, 22, 8080]) == ["22 is open", "8080 is open"]


def test_format_report_empty():
    assert format_report([]) == []


def test_print_report_starts_with_blank_line():
    stream = io.StringIO()
    print_report([443, 80], stream=stream, color=False)
    assert stream.getvalue() == "\n80 is open\n443 is open\n"


def test_print_report_without_open_ports_is_just_a_blank_line():
    stream = io.StringIO()
    print_report([], stream=stream, color=False)
    assert stream.getvalue() == "\n"


def test_print_report_colors_lines():
    stream = io.StringIO()
    print_report([22], stream=stream, color=True)
    assert "22 is open" in stream.getvalue()
    assert "\x1b[" in stream.getvalue()
