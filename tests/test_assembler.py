"""Unit tests for script sequence editing and rendering."""

import pytest

from script_builder.domain.actions import ActionInstance
from script_builder.domain.projects import MoveDirection, ProjectVariable, ScriptIndexOutOfRange
from script_builder.modules.scripts import assembler


def _instance(command, **variables):
    return ActionInstance(action_name="Custom", command=command, variables=variables)


@pytest.fixture
def sequence():
    return [_instance("cmd1"), _instance("cmd2"), _instance("cmd3")]


class TestEditing:
    def test_append_keeps_order(self):
        seq = []
        assembler.append(seq, _instance("a"))
        assembler.append(seq, _instance("b"))
        assert [item.command for item in seq] == ["a", "b"]

    def test_remove_at_shrinks_and_drops_command(self, sequence):
        removed = assembler.remove_at(sequence, 1)
        assert removed.command == "cmd2"
        assert len(sequence) == 2
        assert "cmd2" not in assembler.render(sequence, {}, "C:\\T")

    @pytest.mark.parametrize("index", [-1, 3])
    def test_remove_at_out_of_range(self, sequence, index):
        with pytest.raises(ScriptIndexOutOfRange):
            assembler.remove_at(sequence, index)
        assert len(sequence) == 3

    def test_move_up(self, sequence):
        assert assembler.move_at(sequence, 2, MoveDirection.UP) is True
        assert [item.command for item in sequence] == ["cmd1", "cmd3", "cmd2"]

    def test_move_down_accepts_plain_string(self, sequence):
        assert assembler.move_at(sequence, 0, "down") is True
        assert [item.command for item in sequence] == ["cmd2", "cmd1", "cmd3"]

    def test_move_first_up_is_noop(self, sequence):
        assert assembler.move_at(sequence, 0, MoveDirection.UP) is False
        assert [item.command for item in sequence] == ["cmd1", "cmd2", "cmd3"]

    def test_move_last_down_is_noop(self, sequence):
        assert assembler.move_at(sequence, 2, MoveDirection.DOWN) is False
        assert [item.command for item in sequence] == ["cmd1", "cmd2", "cmd3"]

    def test_move_on_empty_sequence_is_noop(self):
        assert assembler.move_at([], 0, MoveDirection.UP) is False
        assert assembler.move_at([], -1, MoveDirection.DOWN) is False

    def test_move_out_of_range(self, sequence):
        with pytest.raises(ScriptIndexOutOfRange):
            assembler.move_at(sequence, 5, MoveDirection.UP)


class TestRender:
    def test_empty_sequence_renders_empty_string(self):
        assert assembler.render([], {}, "C:\\T") == ""

    def test_token_free_commands_join_with_newline(self, sequence):
        assert assembler.render(sequence, {}, "C:\\T") == "cmd1\ncmd2\ncmd3"

    def test_instance_variable_beats_project_variable(self):
        seq = [_instance("taskkill /im {process_name}", process_name="discord.exe")]
        project_variables = {"process_name": ProjectVariable(value="steam.exe")}
        assert assembler.render(seq, project_variables, "C:\\T") == "taskkill /im discord.exe"

    def test_project_variable_fills_missing_key(self):
        seq = [_instance("timeout /t {seconds}")]
        assert assembler.render(seq, {"seconds": ProjectVariable(value="5")}, "C:\\T") == "timeout /t 5"
