import unittest

from recordkit.core.errors import InvalidArgumentError, NonConfigurableFieldError, ReadOnlyFieldError
from recordkit.core.record import FrozenRecord, define_field, delete_field, freeze_record


def _person():
    return {"firstName": "John", "lastName": "Doe", "age": 30, "email": "j@x.com"}


class TestFreezeRecord(unittest.TestCase):
    def test_every_existing_field_rejects_assignment(self) -> None:
        person = freeze_record(_person())
        for key in ("firstName", "lastName", "age", "email"):
            with self.assertRaises(ReadOnlyFieldError) as cm:
                person[key] = "changed"
            self.assertEqual(cm.exception.message, f"{key} property is read-only.")
            self.assertEqual(cm.exception.code, "field.read_only")
        self.assertEqual(person.to_dict(), _person())

    def test_read_behavior_unchanged(self) -> None:
        person = freeze_record(_person())
        self.assertEqual(person["firstName"], "John")
        self.assertEqual(list(person.keys()), ["firstName", "lastName", "age", "email"])
        self.assertEqual(person, _person())

    def test_fields_added_after_freeze_stay_writable(self) -> None:
        person = freeze_record(_person())
        person["nickname"] = "JD"
        person["nickname"] = "Johnny"
        self.assertEqual(person["nickname"], "Johnny")
        self.assertFalse(person.is_frozen("nickname"))

    def test_freeze_in_place_for_existing_record(self) -> None:
        rec = FrozenRecord({"a": 1})
        out = freeze_record(rec)
        self.assertIs(out, rec)
        self.assertTrue(rec.is_frozen("a"))

    def test_rejects_non_mapping(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            freeze_record(None)
        with self.assertRaises(InvalidArgumentError):
            freeze_record([1, 2])


class TestFieldDescriptors(unittest.TestCase):
    def test_hidden_field_not_enumerated(self) -> None:
        rec = FrozenRecord({"a": 1})
        define_field(rec, "address", {}, writable=False, enumerable=False, configurable=False)
        self.assertIn("address", rec)
        self.assertEqual(rec["address"], {})
        self.assertEqual(list(rec), ["a"])
        self.assertEqual(len(rec), 1)
        self.assertEqual(rec.all_keys(), ["a", "address"])

    def test_redefine_non_configurable_fails(self) -> None:
        rec = FrozenRecord()
        define_field(rec, "x", 1, configurable=False)
        with self.assertRaises(NonConfigurableFieldError):
            define_field(rec, "x", 2)
        self.assertEqual(rec["x"], 1)

    def test_define_field_requires_name(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            define_field(FrozenRecord(), "", 1)


class TestDeleteField(unittest.TestCase):
    def test_delete_non_configurable_fails(self) -> None:
        person = freeze_record(_person())
        with self.assertRaises(NonConfigurableFieldError) as cm:
            delete_field(person, "age")
        self.assertEqual(cm.exception.message, "age property is non-configurable.")
        with self.assertRaises(NonConfigurableFieldError):
            del person["age"]
        self.assertEqual(person["age"], 30)

    def test_delete_configurable_field(self) -> None:
        rec = FrozenRecord({"a": 1, "b": 2})
        delete_field(rec, "a")
        self.assertEqual(rec.to_dict(), {"b": 2})

    def test_delete_missing_field_is_noop(self) -> None:
        rec = FrozenRecord({"a": 1})
        delete_field(rec, "zzz")
        plain = {"a": 1}
        delete_field(plain, "zzz")
        delete_field(plain, "a")
        self.assertEqual(plain, {})

    def test_delete_validates_arguments(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            delete_field("not a record", "a")
        with self.assertRaises(InvalidArgumentError):
            delete_field({"a": 1}, "")
        with self.assertRaises(InvalidArgumentError):
            delete_field({"a": 1}, 3)


if __name__ == "__main__":
    unittest.main()
