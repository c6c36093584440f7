"""
Test suite for cli module

Tests command dispatch and logging setup.
"""

import pytest
from unittest.mock import Mock, patch

from practice_kit import cli


class TestCli:
    """Test the command line entry point"""
    
    @pytest.mark.parametrize("command", ["divide", "read-file", "bank-demo"])
    def test_dispatch(self, command):
        """Test each command runs its exercise"""
        runner = Mock()
        
        with patch.dict(cli.COMMANDS, {command: runner}), \
                patch("practice_kit.cli.setup_logging") as setup:
            assert cli.main([command]) == 0
        
        runner.assert_called_once_with()
        setup.assert_called_once()
    
    def test_log_level_option(self):
        """Test --log-level overrides configuration"""
        with patch.dict(cli.COMMANDS, {"bank-demo": Mock()}), \
                patch("practice_kit.cli.setup_logging") as setup:
            cli.main(["bank-demo", "--log-level", "DEBUG"])
        
        assert setup.call_args.kwargs["level"] == "DEBUG"
    
    def test_keyboard_interrupt(self, capsys):
        """Test Ctrl+C exits with status 130"""
        with patch.dict(cli.COMMANDS, {"divide": Mock(side_effect=KeyboardInterrupt)}), \
                patch("practice_kit.cli.setup_logging"):
            assert cli.main(["divide"]) == 130
        
        assert "Interrupted" in capsys.readouterr().out
    
    def test_unknown_command(self):
        """Test argparse rejects unknown commands"""
        with pytest.raises(SystemExit):
            cli.main(["transfer"])
