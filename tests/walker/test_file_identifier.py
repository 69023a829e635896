"""Unit tests for FileIdentifier and PermissionAction."""

import os

import pytest

from copytree.walker.file_identifier import FileIdentifier
from copytree.walker.permission_action import PermissionAction


def test_identifier_from_stat(tmp_path):
    stat_result = os.stat(tmp_path)
    identifier = FileIdentifier.from_stat(stat_result)
    assert identifier == (stat_result.st_dev, stat_result.st_ino)
    assert identifier.device_id == stat_result.st_dev
    assert identifier.inode_number == stat_result.st_ino


def test_same_directory_has_same_identifier(tmp_path):
    (tmp_path / "a").mkdir()
    first = FileIdentifier.from_stat(os.stat(tmp_path / "a"))
    second = FileIdentifier.from_stat(os.stat(tmp_path / "." / "a"))
    other = FileIdentifier.from_stat(os.stat(tmp_path))
    assert first == second
    assert first != other


@pytest.mark.parametrize("value", ["ignore", "warn", "raise"])
def test_permission_action_values(value):
    assert PermissionAction(value).value == value
    assert PermissionAction(value) == value
