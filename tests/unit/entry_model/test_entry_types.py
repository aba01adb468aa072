"""Tests for listing entry datatypes.

Covers permission parsing, date fallback selection and entry validation.
"""

from __future__ import annotations

import dataclasses
import unittest

from ils.entry_model import Directory, Entry, EntryDate, Owner, Permissions, RegularFile, Timestamp


class PermissionsTests(unittest.TestCase):
    def test_from_mode_parses_triplets(self) -> None:
        perms = Permissions.from_mode(0o754)
        self.assertTrue(perms.user_read and perms.user_write and perms.user_execute)
        self.assertTrue(perms.group_read and perms.group_execute)
        self.assertFalse(perms.group_write)
        self.assertTrue(perms.other_read)
        self.assertFalse(perms.other_write or perms.other_execute)

    def test_special_bits_are_parsed_but_not_rendered(self) -> None:
        perms = Permissions.from_mode(0o7777)
        self.assertTrue(perms.sticky and perms.setgid and perms.setuid)
        self.assertEqual(str(perms), "rwxrwxrwx")

    def test_string_form_is_always_nine_characters(self) -> None:
        for mode in (0, 0o1, 0o640, 0o755, 0o4711, 0xFFFF):
            self.assertEqual(len(str(Permissions.from_mode(mode))), 9)


class EntryDateTests(unittest.TestCase):
    def test_effective_prefers_modified(self) -> None:
        date = EntryDate(modified=Timestamp(100), changed=Timestamp(200))
        self.assertEqual(date.effective(), Timestamp(100))

    def test_epoch_sentinel_falls_back_to_changed(self) -> None:
        date = EntryDate(modified=Timestamp(0), changed=Timestamp(200, 5))
        self.assertEqual(date.effective(), Timestamp(200, 5))

    def test_epoch_with_subsecond_part_is_kept(self) -> None:
        date = EntryDate(modified=Timestamp(0, 0), changed=Timestamp(200))
        self.assertEqual(date.effective(), Timestamp(0, 0))

    def test_epoch_sentinel_without_changed_is_kept(self) -> None:
        date = EntryDate(modified=Timestamp(0))
        self.assertEqual(date.effective(), Timestamp(0))


class EntryTests(unittest.TestCase):
    def test_entry_is_immutable(self) -> None:
        entry = Entry(name="a.txt", owner=Owner(1000, 100))
        with self.assertRaises(dataclasses.FrozenInstanceError):
            entry.name = "b.txt"  # type: ignore[misc]

    def test_defaults_describe_a_plain_file(self) -> None:
        entry = Entry(name="a.txt")
        self.assertEqual(entry.file_type, RegularFile())
        self.assertIsNone(entry.permissions)
        self.assertIsNone(entry.children)

    def test_rejects_empty_name(self) -> None:
        with self.assertRaises(ValueError):
            Entry(name="")

    def test_rejects_negative_size_and_inode(self) -> None:
        with self.assertRaises(ValueError):
            Entry(name="a", size=-1)
        with self.assertRaises(ValueError):
            Entry(name="a", inode=-1)

    def test_owner_renders_uid_gid(self) -> None:
        self.assertEqual(str(Owner(uid=0, gid=42)), "0:42")

    def test_file_type_variants_compare_by_flags(self) -> None:
        self.assertEqual(Directory(setuid=False), Directory())
        self.assertNotEqual(RegularFile(executable=True), RegularFile())


if __name__ == "__main__":
    unittest.main()
