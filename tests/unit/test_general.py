import unittest

from symdemangle.s02_general.config import Config
from symdemangle.s02_general.cxxfilt import demangle
from symdemangle.s02_general.model import is_mangled, strip_params


class TestIsMangled(unittest.TestCase):
    def test_prefix(self) -> None:
        self.assertTrue(is_mangled("_ZN3foo3barEv"))
        self.assertTrue(is_mangled("_Z"))
        self.assertFalse(is_mangled("main"))
        self.assertFalse(is_mangled("_vgr00000ZU_foo_bar"))
        self.assertFalse(is_mangled("Z_"))
        self.assertFalse(is_mangled(""))


class TestStripParams(unittest.TestCase):
    def test_strips_trailing_params(self) -> None:
        self.assertEqual(strip_params("foo::bar(int, char const*)"), "foo::bar")
        self.assertEqual(strip_params("foo::bar() const"), "foo::bar")
        self.assertEqual(strip_params("add(int, int)"), "add")

    def test_nested_parens(self) -> None:
        self.assertEqual(strip_params("foo(void (*)(int))"), "foo")
        self.assertEqual(strip_params("foo::operator()(int)"), "foo::operator()")

    def test_keeps_names_without_params(self) -> None:
        self.assertEqual(strip_params("foo::bar"), "foo::bar")
        self.assertEqual(strip_params("vtable for foo"), "vtable for foo")

    def test_keeps_entities_after_params(self) -> None:
        self.assertEqual(strip_params("foo(int)::counter"), "foo(int)::counter")
        self.assertEqual(strip_params("foo<int (*)()>"), "foo<int (*)()>")


class TestCxxfiltDemangle(unittest.TestCase):
    def test_demangles(self) -> None:
        self.assertEqual(demangle("_ZN3foo3barEv", Config.default()), "foo::bar()")
        self.assertEqual(demangle("_Z3addii", Config.default()), "add(int, int)")

    def test_without_params(self) -> None:
        self.assertEqual(demangle("_ZN3foo3barEv", Config(params=False)), "foo::bar")

    def test_not_mangled(self) -> None:
        self.assertIsNone(demangle("main", Config.default()))

    def test_invalid(self) -> None:
        self.assertIsNone(demangle("_ZN3foo", Config.default()))

    def test_rust_legacy_keeps_rust_mangling(self) -> None:
        path = "_$LT$std..sys..fd..FileDesc$u20$as$u20$core..ops..Drop$GT$"
        name = f"_ZN{len(path)}{path}4drop17hc68340e1baa4987aE"

        self.assertEqual(demangle(name, Config.default()), f"{path}::drop::hc68340e1baa4987a")


if __name__ == "__main__":
    unittest.main()
