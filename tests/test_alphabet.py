import pytest

from cipherkit.core.alphabet import (
    ALPHABET,
    MODULUS,
    TABLE,
    AlphabetTable,
    canonicalize,
    index_to_symbol,
    symbol_to_index,
)
from cipherkit.core.errors import CipherError, IndexOutOfRange, UnknownSymbol
from cipherkit.core.utils import floor_mod, shift_index, shift_indices


def test_table_is_bijective_over_27_symbols():
    assert MODULUS == 27
    assert TABLE.size == 27
    for i in range(27):
        assert symbol_to_index(index_to_symbol(i)) == i
    assert {index_to_symbol(i) for i in range(27)} == set(ALPHABET)


def test_fixed_assignments():
    assert symbol_to_index("A") == 0
    assert symbol_to_index("Z") == 25
    assert symbol_to_index(" ") == 26
    assert index_to_symbol(26) == " "


def test_lowercase_letters_fold_to_uppercase():
    assert symbol_to_index("q") == symbol_to_index("Q")


@pytest.mark.parametrize("bad", ["1", "!", "\t", "é", "ı", "", "AB"])
def test_unknown_symbol(bad):
    with pytest.raises(UnknownSymbol):
        symbol_to_index(bad)


@pytest.mark.parametrize("bad", [-1, 27, 100, True, "3"])
def test_index_out_of_range(bad):
    with pytest.raises(IndexOutOfRange):
        index_to_symbol(bad)


def test_errors_are_value_errors():
    assert issubclass(UnknownSymbol, CipherError)
    assert issubclass(CipherError, ValueError)


def test_canonicalize_uppercases_and_keeps_spaces():
    assert canonicalize("Bikini bottom") == "BIKINI BOTTOM"
    assert canonicalize("") == ""


def test_canonicalize_reports_position():
    with pytest.raises(UnknownSymbol) as info:
        canonicalize("AB3D")
    assert info.value.symbol == "3"
    assert info.value.position == 2


def test_table_views_are_read_only():
    with pytest.raises(TypeError):
        TABLE._to_index["?"] = 99  # type: ignore[index]


def test_duplicate_symbols_rejected():
    with pytest.raises(ValueError):
        AlphabetTable(symbols="AAB")


def test_floor_mod_never_negative():
    assert floor_mod(-3) == 24
    assert floor_mod(-27) == 0
    assert floor_mod(29) == 2
    assert shift_index(0, -1) == 26


def test_shift_indices_rejects_bad_sign():
    with pytest.raises(ValueError):
        shift_indices([1, 2], [1, 1], sign=0)


def test_shift_indices_raises_when_offsets_run_out():
    with pytest.raises(ValueError):
        shift_indices([1, 2, 3], [1], sign=1)
    assert shift_indices([1, 2], [1, 1, 1], sign=-1) == [0, 1]
