from tensorkit.tensor import Dtype, Tensor
from tensorkit.tensor_demo import main


def _reference():
    return Tensor((2, 3, 4), Dtype.FLOAT32)


def test_main_returns_zero_without_errors(capsys):
    assert main() == 0
    assert capsys.readouterr().err == ""


def test_main_prints_counts(capsys):
    main()
    out = capsys.readouterr().out
    t = _reference()
    assert f"Num elements: {t.numel()}\n" in out
    assert f"Total bytes: {t.nbytes()}\n" in out


def test_main_prints_each_dimension(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    t = _reference()
    dim_lines = [line for line in lines if line.startswith("Dim ")]
    assert dim_lines == [f"Dim {i}: {d}" for i, d in enumerate(t.shape)]


def test_main_prints_one_line_per_element(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    element_lines = [line for line in lines if line.startswith("Element ")]
    assert len(element_lines) == _reference().numel()
    assert element_lines[0] == "Element 0: 0 0 0 "
    last_indices = [int(x) for x in element_lines[-1].split(":")[1].split()]
    assert last_indices == [d - 1 for d in _reference().shape]


def test_main_prints_shape_and_stride(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    t = _reference()
    assert "Shape: " + "".join(f"{d} " for d in t.shape) in lines
    assert "Stride: " + "".join(f"{s} " for s in t.stride) in lines


def test_main_writes_first_element(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "First element = 3.14"