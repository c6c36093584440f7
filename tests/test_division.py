"""
Test suite for division module

Tests operand parsing, division and the file based workflow.
"""

import pytest

from practice_kit.division import DivisionResult, divide, divide_file, parse_number, parse_operands
from practice_kit.errors import DivideByZeroError, FileUnavailableError, MalformedInputError


class TestParsing:
    """Test operand parsing"""
    
    def test_parse_operands(self):
        """Test first two lines become floats"""
        assert parse_operands(["10", " 4 \n"]) == (10.0, 4.0)
    
    def test_extra_lines_ignored(self):
        """Test only the first two lines are used"""
        assert parse_operands(["1.5", "-3", "not a number"]) == (1.5, -3.0)
    
    @pytest.mark.parametrize("lines", [[], ["10"]])
    def test_too_few_lines(self, lines):
        """Test files with fewer than two numbers"""
        with pytest.raises(MalformedInputError, match="at least two numbers"):
            parse_operands(lines)
    
    def test_configured_minimum(self):
        """Test a stricter minimum line count"""
        with pytest.raises(MalformedInputError):
            parse_operands(["1", "2"], min_lines=3)
        assert parse_operands(["1", "2", "3"], min_lines=3) == (1.0, 2.0)
    
    @pytest.mark.parametrize("text", ["abc", "", "1,5", "nan", "inf"])
    def test_bad_numbers(self, text):
        """Test non-numeric and non-finite text"""
        with pytest.raises(MalformedInputError):
            parse_number(text)
    
    def test_malformed_is_value_error(self):
        """Test parse failures can be caught as ValueError"""
        with pytest.raises(ValueError):
            parse_operands(["ten", "2"])


class TestDivide:
    """Test division"""
    
    def test_divide(self):
        """Test a plain quotient"""
        assert divide(10.0, 4.0) == 2.5
        assert divide(-9.0, 3.0) == -3.0
    
    def test_divide_by_zero(self):
        """Test zero divisor"""
        with pytest.raises(DivideByZeroError):
            divide(1.0, 0.0)
        with pytest.raises(ZeroDivisionError):
            divide(1.0, -0.0)
    
    def test_zero_dividend(self):
        """Test zero may be divided"""
        assert divide(0.0, 5.0) == 0.0


class TestDivideFile:
    """Test the file based workflow"""
    
    def test_divide_file(self, tmp_path):
        """Test reading and dividing"""
        path = tmp_path / "numbers.txt"
        path.write_text("10\n4\n", encoding="utf-8")
        
        result = divide_file(path)
        
        assert result == DivisionResult(dividend=10.0, divisor=4.0, quotient=2.5)
    
    def test_zero_in_file(self, tmp_path):
        """Test a zero divisor read from the file"""
        path = tmp_path / "numbers.txt"
        path.write_text("10\n0\n", encoding="utf-8")
        
        with pytest.raises(DivideByZeroError):
            divide_file(path)
    
    def test_malformed_file(self, tmp_path):
        """Test a file with text instead of numbers"""
        path = tmp_path / "numbers.txt"
        path.write_text("ten\ntwo\n", encoding="utf-8")
        
        with pytest.raises(MalformedInputError):
            divide_file(path)
    
    def test_missing_file(self, tmp_path):
        """Test a path that does not exist"""
        with pytest.raises(FileUnavailableError):
            divide_file(tmp_path / "missing.txt")
