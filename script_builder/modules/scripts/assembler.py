"""Ordered before/after sequences of action instances and their rendering."""

from __future__ import annotations

from collections.abc import Mapping, MutableSequence, Sequence
from os import PathLike
from typing import Any, Union

from script_builder.domain.actions import ActionInstance
from script_builder.domain.projects import MoveDirection, ScriptIndexOutOfRange

from .resolver import resolve


def _check_index(sequence: Sequence[ActionInstance], index: int) -> None:
    if not 0 <= index < len(sequence):
        raise ScriptIndexOutOfRange(
            f"script index {index} out of range for sequence of length {len(sequence)}"
        )


def append(sequence: MutableSequence[ActionInstance], instance: ActionInstance) -> None:
    sequence.append(instance)


def remove_at(sequence: MutableSequence[ActionInstance], index: int) -> ActionInstance:
    _check_index(sequence, index)
    return sequence.pop(index)


def move_at(
    sequence: MutableSequence[ActionInstance],
    index: int,
    direction: Union[MoveDirection, str],
) -> bool:
    """Swap the instance at ``index`` with its neighbour.

    Moving the first item up or the last item down leaves the sequence as it
    is. Returns whether anything moved.
    """
    direction = MoveDirection(direction)
    if direction is MoveDirection.UP and index == 0:
        return False
    if direction is MoveDirection.DOWN and index == len(sequence) - 1:
        return False
    _check_index(sequence, index)
    target = index - 1 if direction is MoveDirection.UP else index + 1
    sequence[index], sequence[target] = sequence[target], sequence[index]
    return True


def merge_variables(
    project_variables: Mapping[str, Any],
    instance_variables: Mapping[str, Any],
) -> dict[str, Any]:
    merged: dict[str, Any] = dict(project_variables)
    merged.update(instance_variables)
    return merged


def render_instance(
    instance: ActionInstance,
    project_variables: Mapping[str, Any],
    tools_path: Union[str, PathLike],
) -> str:
    return resolve(instance.command, merge_variables(project_variables, instance.variables), tools_path)


def render(
    sequence: Sequence[ActionInstance],
    project_variables: Mapping[str, Any],
    tools_path: Union[str, PathLike],
) -> str:
    return "\n".join(render_instance(instance, project_variables, tools_path) for instance in sequence)
