import pytest

from json_schema_to_types.enum_collector import EnumCollector, EnumType


class TestEnumCollector:
    def test_derive_name(self):
        assert EnumCollector.derive_name("Attachment", "contentEncoding") == "AttachmentContentEncoding"

    def test_register_returns_enum_type(self):
        collector = EnumCollector()
        enum_type = collector.register("SourceMediaType", ["a", "b"])
        assert enum_type == EnumType(name="SourceMediaType", values=("a", "b"))
        assert "SourceMediaType" in collector

    def test_register_same_name_twice_keeps_one_entry(self):
        collector = EnumCollector()
        collector.register("PickleStepType", ["Unknown", "Action"])
        collector.register("PickleStepType", ["Outcome"])

        assert len(collector) == 1
        assert collector.get("PickleStepType").values == ("Unknown", "Action")

    def test_duplicate_values_are_dropped_in_order(self):
        collector = EnumCollector()
        enum_type = collector.register("Status", ["PASSED", "FAILED", "PASSED", "SKIPPED"])
        assert enum_type.values == ("PASSED", "FAILED", "SKIPPED")

    def test_enums_sorted_by_name(self):
        collector = EnumCollector()
        collector.register("Zeta", ["z"])
        collector.register("Alpha", ["a"])
        collector.register("Mu", ["m"])
        assert [e.name for e in collector.enums] == ["Alpha", "Mu", "Zeta"]

    def test_frozen_collector_rejects_registration(self):
        collector = EnumCollector()
        collector.register("Alpha", ["a"])
        collector.freeze()

        assert collector.frozen
        with pytest.raises(RuntimeError):
            collector.register("Beta", ["b"])
