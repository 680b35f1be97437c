"""Tests for named operations and the CLI calculator."""

import pytest

from limbint import BigInt, DivisionByZero, InvalidOperand
from limbint.cli import main
from limbint.operations import Operation, evaluate, parse_operation


class TestParseOperation:
    """Tests for resolving operation names and symbols."""

    def test_names(self):
        """Names resolve case-insensitively."""
        assert parse_operation("add") is Operation.ADD
        assert parse_operation("DIVMOD") is Operation.DIVMOD

    def test_symbols(self):
        """Operator symbols resolve to names."""
        assert parse_operation("*") is Operation.MUL
        assert parse_operation("<<") is Operation.SHL
        assert parse_operation("~") is Operation.INVERT

    def test_unknown_raises(self):
        """Unknown names raise InvalidOperand."""
        with pytest.raises(InvalidOperand):
            parse_operation("pow")


class TestEvaluate:
    """Tests for evaluate()."""

    def test_binary(self):
        """Binary operations use both operands."""
        assert evaluate(Operation.SUB, BigInt(3), BigInt(10)) == (BigInt(-7), None)
        assert evaluate(Operation.XOR, BigInt(12), BigInt(10))[0] == 6

    def test_unary(self):
        """Unary operations ignore rhs."""
        assert evaluate(Operation.NEG, BigInt(3))[0] == -3
        assert evaluate(Operation.INVERT, BigInt(0))[0] == -1
        assert evaluate(Operation.INC, BigInt(-1))[0] == 0
        assert evaluate(Operation.DEC, BigInt(0))[0] == -1
        assert evaluate(Operation.ABS, BigInt(-5))[0] == 5

    def test_divmod(self):
        """divmod returns quotient and remainder."""
        assert evaluate(Operation.DIVMOD, BigInt(-7), BigInt(3)) == (BigInt(-2), BigInt(-1))

    def test_cmp(self):
        """cmp returns -1, 0 or 1."""
        assert evaluate(Operation.CMP, BigInt(1), BigInt(2))[0] == -1
        assert evaluate(Operation.CMP, BigInt(2), BigInt(2))[0] == 0

    def test_shifts(self):
        """Shift amounts come from rhs."""
        assert evaluate(Operation.SHL, BigInt(1), BigInt(64))[0] == 2**64
        assert evaluate(Operation.SHR, BigInt(-5), BigInt(1))[0] == -3

    def test_shift_limit(self):
        """Shift amounts beyond max_shift raise InvalidOperand."""
        with pytest.raises(InvalidOperand):
            evaluate(Operation.SHL, BigInt(1), BigInt(100), max_shift=64)
        with pytest.raises(InvalidOperand):
            evaluate(Operation.SHR, BigInt(1), BigInt(-100), max_shift=64)

    def test_missing_rhs_raises(self):
        """Binary operations without rhs raise InvalidOperand."""
        with pytest.raises(InvalidOperand) as exc_info:
            evaluate(Operation.ADD, BigInt(1))
        assert "'add'" in str(exc_info.value)

    def test_unary_with_rhs_raises(self):
        """Unary operations reject a supplied rhs instead of ignoring it."""
        with pytest.raises(InvalidOperand) as exc_info:
            evaluate(Operation.NEG, BigInt(1), BigInt(5))
        assert "takes no right operand" in str(exc_info.value)
        with pytest.raises(InvalidOperand):
            evaluate(Operation.ABS, BigInt(-1), BigInt(0))

    def test_division_by_zero_propagates(self):
        """DivisionByZero is not swallowed."""
        with pytest.raises(DivisionByZero):
            evaluate(Operation.MOD, BigInt(1), BigInt(0))


class TestCli:
    """Tests for the limbint-calc entry point."""

    def test_binary(self, capsys):
        """Prints the result of a binary operation."""
        assert main(["123456789123456789", "*", "1000000000"]) == 0
        assert capsys.readouterr().out == "123456789123456789000000000\n"

    def test_negative_operand(self, capsys):
        """Negative numbers are accepted as operands."""
        assert main(["-7", "mod", "3"]) == 0
        assert capsys.readouterr().out == "-1\n"

    def test_unary(self, capsys):
        """Unary operations take one operand."""
        assert main(["5", "neg"]) == 0
        assert capsys.readouterr().out == "-5\n"

    def test_divmod_prints_both(self, capsys):
        """divmod prints quotient then remainder."""
        assert main(["7", "divmod", "-3"]) == 0
        assert capsys.readouterr().out == "-2\n1\n"

    def test_division_by_zero(self, capsys):
        """Errors print a message to stderr and return 1."""
        assert main(["5", "/", "0"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Division by zero" in captured.err

    def test_invalid_operand(self, capsys):
        """Malformed operands print a message to stderr and return 1."""
        assert main(["12a3", "+", "1"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid decimal string" in captured.err

    def test_unary_with_rhs_fails(self, capsys):
        """A right operand on a unary operation is an error on stderr."""
        assert main(["5", "neg", "3"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "takes no right operand" in captured.err
