from uuid import UUID

from inscripta.featureloc.util.hashing import digest_object


class TestDigestObject:
    def test_known_digests(self):
        assert digest_object("gene") == UUID("9a1f7e07-68e6-e222-e27d-09a26810b65d")
        assert digest_object("a", ["b", None]) == UUID("0b2e4ec3-1143-cb4d-3e61-273f13cccec3")

    def test_stable(self):
        assert digest_object("gene", "1..10", [["gene", "INS"]]) == digest_object("gene", "1..10", [["gene", "INS"]])

    def test_structure_is_significant(self):
        assert digest_object("a", "b") != digest_object(["a", "b"])
        assert digest_object(["a", "b"]) != digest_object([["a", "b"]])
        assert digest_object("ab") != digest_object("a", "b")
        assert digest_object("b", "a") != digest_object("a", "b")
        assert digest_object(None) != digest_object("None")
        assert digest_object(("a", "b")) == digest_object(["a", "b"])
