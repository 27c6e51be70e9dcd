import pytest

from tensorkit.mathutils import add, calculate_area, main, multiply, print_result


@pytest.mark.parametrize("a,b", [(0, 0), (5, 3), (-4, 9), (100, -100)])
def test_add_is_commutative(a, b):
    assert add(a, b) == add(b, a)


@pytest.mark.parametrize("a", [-7, 0, 12, 99999])
def test_add_zero_is_identity(a):
    assert add(a, 0) == a


def test_add_known_value():
    assert add(5, 3) == 8


@pytest.mark.parametrize("a", [-3, 0, 1, 250])
def test_multiply_identity(a):
    assert multiply(a, 1) == a
    assert multiply(1, a) == a


@pytest.mark.parametrize("a,b", [(4, 7), (-2, 6), (0, 13)])
def test_multiply_is_commutative(a, b):
    assert multiply(a, b) == multiply(b, a)


def test_multiply_known_value():
    assert multiply(4, 7) == 28


def test_area_of_unit_circle_uses_source_constant():
    assert calculate_area(1.0) == pytest.approx(3.14159)


def test_area_of_zero_radius():
    assert calculate_area(0.0) == 0.0


@pytest.mark.parametrize("radius", [0.5, 1.0, 2.5, 10.0])
def test_area_scales_quadratically(radius):
    assert calculate_area(2 * radius) == pytest.approx(4 * calculate_area(radius))


def test_area_sign_of_radius_does_not_matter():
    assert calculate_area(-2.5) == pytest.approx(calculate_area(2.5))


def test_print_result_format(capsys):
    print_result(42)
    assert capsys.readouterr().out == "Result: 42\n"


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Hello, World!"
    assert lines[1] == f"Result: {add(5, 3)}"
    assert lines[2] == f"Result: {multiply(4, 7)}"
    assert lines[3].startswith("Area: ")
    assert float(lines[3][len("Area: "):]) == pytest.approx(calculate_area(2.5), rel=1e-5)