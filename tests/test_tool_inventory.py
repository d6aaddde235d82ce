"""Unit tests for helper tool presence checks."""

from script_builder.modules.devices import KNOWN_TOOLS, ToolInventory


class TestToolInventory:
    def test_all_missing_in_empty_dir(self, tmp_path):
        report = ToolInventory(tools_path=tmp_path).status()
        assert report.total == len(KNOWN_TOOLS)
        assert report.available == 0
        assert report.missing == len(KNOWN_TOOLS)
        assert all(tool.size is None for tool in report.tools)

    def test_present_tool_reports_size(self, tmp_path):
        (tmp_path / "nircmd.exe").write_bytes(b"x" * 128)
        report = ToolInventory(tools_path=tmp_path).status()
        nircmd = next(tool for tool in report.tools if tool.filename == "nircmd.exe")
        assert nircmd.available is True
        assert nircmd.size == 128
        assert report.available == 1
        assert report.missing == report.total - 1

    def test_missing_tools_dir(self, tmp_path):
        report = ToolInventory(tools_path=tmp_path / "absent").status()
        assert report.available == 0
