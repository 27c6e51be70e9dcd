from tensorkit.dense_demo import main


def _lines(capsys):
    assert main() == 0
    return capsys.readouterr().out.splitlines()


def test_first_line_describes_nested_tensor(capsys):
    lines = _lines(capsys)
    assert lines[0] == "Tensor t: Tensor(3,3) dtype=Float32"


def test_rows_and_cols_match_info_line(capsys):
    lines = _lines(capsys)
    rows = lines[lines.index("Rows:") + 1]
    cols = lines[lines.index("Cols:") + 1]
    assert f"Tensor({rows},{cols})" in lines[0]


def test_element_value(capsys):
    lines = _lines(capsys)
    assert lines[lines.index("Element at (1,2):") + 1] == "3"


def test_zeros_info_and_trailing_blank_lines(capsys):
    lines = _lines(capsys)
    assert lines[-2] == "Tensor(2,3) dtype=Float32"
    assert lines[-1] == ""
    assert lines[-3] == ""