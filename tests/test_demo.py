from fluent import ABSENT
from models import DemoConfig
from main import run_demo


class TestDemo:
    """Test the demonstration entry point"""

    def test_default_output(self, capsys):
        joined, largest, total = run_demo()
        out = capsys.readouterr().out

        assert joined == "10, 8, 6, 4, 2"
        assert largest == 600
        assert total == 445
        lines = [line for line in out.splitlines() if line and not line.startswith("---")]
        assert "10, 8, 6, 4, 2" in lines
        assert "600" in lines
        assert "445" in lines

    def test_custom_config(self, capsys):
        config = DemoConfig(numbers=[1, 2], values=[5, 7], factor=3, separator="/")
        joined, largest, total = run_demo(config)
        assert joined == "6/3"
        assert largest == 21
        assert total == 12

    def test_empty_values_report_absence(self, capsys):
        joined, largest, total = run_demo(DemoConfig(numbers=[], values=[]))
        out = capsys.readouterr().out
        assert joined == ""
        assert largest is ABSENT
        assert total is ABSENT
        assert "(no values)" in out
