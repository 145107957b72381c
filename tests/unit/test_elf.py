import unittest
from types import SimpleNamespace
from unittest.mock import Mock

from symdemangle.elf import function_names


def _symbol(name: str, type_: str) -> SimpleNamespace:
    return SimpleNamespace(name=name, entry={"st_info": {"type": type_}})


class TestFunctionNames(unittest.TestCase):
    def test_functions_only(self) -> None:
        section = Mock()
        section.iter_symbols.return_value = iter(
            [
                _symbol("", "STT_NOTYPE"),
                _symbol("_ZN3foo3barEv", "STT_FUNC"),
                _symbol("$t", "STT_NOTYPE"),
                _symbol("counter", "STT_OBJECT"),
                _symbol("main", "STT_FUNC"),
                _symbol("", "STT_FUNC"),
                _symbol("_ZN3foo3barEv", "STT_FUNC"),
                _symbol("_vgr00000ZU_libcZdsoZa_malloc", "STT_FUNC"),
            ]
        )
        elffile = Mock()
        elffile.get_section_by_name.return_value = section

        self.assertEqual(
            list(function_names(elffile)),
            ["_ZN3foo3barEv", "main", "_vgr00000ZU_libcZdsoZa_malloc"],
        )
        elffile.get_section_by_name.assert_called_once_with(".symtab")

    def test_stripped(self) -> None:
        elffile = Mock()
        elffile.get_section_by_name.return_value = None

        with self.assertRaises(ValueError):
            function_names(elffile)


if __name__ == "__main__":
    unittest.main()
