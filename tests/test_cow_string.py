import pytest

from rdecontainers.cow_string import CowString


def test_empty_string():
    s = CowString()
    assert len(s) == 0
    assert str(s) == ""


def test_len_of_c_string():
    s = CowString("alamakota")
    assert len(s) == 9


def test_copy_ctor_len():
    s = CowString("alamakota")
    s2 = CowString(s)
    assert len(s2) == 9
    assert s2[0] == "a"
    assert s2[1] == "l"
    assert s2[8] == "a"


def test_compare():
    s = CowString("alamakota")
    s2 = CowString("alamakota")
    assert s.compare("ala") != 0
    assert s.compare(s2) == 0
    s3 = CowString("alamakot")
    assert s.compare(s3) == 1
    assert s3.compare(s2) == -1


def test_eq_op():
    s = CowString("alamakota")
    s2 = CowString(s)
    assert s == s2


def test_ordering_compares_length_first():
    assert CowString("zz") < CowString("aaa")
    assert CowString("aaa") > CowString("zz")


def test_assign_string():
    s = CowString()
    s2 = CowString("ala")
    s.assign(s2)
    assert s[0] == "a"
    assert s[1] == "l"
    assert s[2] == "a"
    assert s.compare(s2) == 0
    assert s.compare("ala") == 0
    assert s == s2


def test_assign_c_string():
    s = CowString()
    s.assign("alamakota")
    assert s.compare("alamakota") == 0
    assert len(s) == 9


def test_substring():
    s = CowString("alamakota")
    s2 = CowString(s.substr(0, 3))
    assert s2.compare("ala") == 0
    assert str(s.substr(4)) == "akota"


def test_substring_out_of_range():
    with pytest.raises(IndexError):
        CowString("abc").substr(2, 5)


def test_append_str():
    s = CowString("ala")
    scopy = CowString(s)
    s2 = CowString("makota")
    s.append(s2)
    assert s.compare("alamakota") == 0
    assert s2.compare("makota") == 0
    assert scopy.compare("ala") == 0


def test_append_c_str():
    s = CowString("ala")
    scopy = CowString(s)
    s.append("-ma-kota")
    assert s.compare("ala-ma-kota") == 0
    assert str(scopy) == "ala"


def test_append_str_no_make_unique():
    s = CowString("ala")
    s2 = CowString("makota")
    s.append(s2)
    assert s.compare("alamakota") == 0
    assert s2.compare("makota") == 0


def test_append_force_realloc():
    s = CowString("ala")
    s2 = CowString("makota1234567890123456789012345678901234567890")
    s.append(s2)
    assert s.compare("alamakota1234567890123456789012345678901234567890") == 0
    assert s.capacity == 64


def test_make_lower():
    s = CowString("AlAMaKoTA")
    s.make_lower()
    assert s.compare("alamakota") == 0


def test_make_lower_shifts_every_char_below_a():
    s = CowString("a-b")
    s.make_lower()
    assert str(s) == "aMb"


def test_make_upper():
    s = CowString("AlAMaKoTA")
    s.make_upper()
    assert s.compare("ALAMAKOTA") == 0


def test_copy_empty():
    s = CowString()
    s2 = CowString(s)
    assert len(s2) == 0


def test_find():
    t = CowString("hello world rde stl is fast")
    assert t.find("hello") == 0
    assert t.find("is") == 20
    assert t.find("fast") == 23
    assert t.find("st") == 16
    assert t.find(" ") == 5
    assert t.find("java") == CowString.NPOS
    assert t.find("fastideous") == CowString.NPOS


def test_reverse_find():
    t = CowString("hello world rde stl is fast")
    assert t.rfind("hello") == 0
    assert t.rfind("is") == 20
    assert t.rfind("fast") == 23
    assert t.rfind("st") == 25
    assert t.rfind(" ") == 22
    assert t.rfind("java") == CowString.NPOS
    assert t.rfind("fastideous") == CowString.NPOS
    t = CowString("ste stf stg sth")
    assert t.rfind("stf") == 4


def test_find_index_of():
    t = CowString("hello")
    assert t.find_index_of("l") == 2
    assert t.find_index_of_last("l") == 3
    assert t.find_index_of("z") == CowString.NPOS


def test_append_sequence():
    s = CowString()
    s.append("hello")
    assert s.compare(CowString("hello")) == 0
    s.append("world")
    assert s.compare(CowString("helloworld")) == 0
    s.append("rde")
    assert s.compare(CowString("helloworldrde")) == 0


def test_copy_storage():
    t = CowString("HelloWorldThisIsALongString")
    s = CowString(
        "HelloWorldThisIsAReallyReallyReallyReallyReallyReallyReallyReally"
        "ReallyReallyReallyReallyReallyReallyReallyReallyReallyReallyLongString"
    )
    x = CowString(t)
    x.clear()
    x.assign(s)
    assert len(x) == len(s)
    assert x.compare(s) == 0


def test_copy_shares_until_modified():
    s = CowString("shared")
    c = s.copy()
    assert c.shares_buffer_with(s)
    c.append("!")
    assert not c.shares_buffer_with(s)
    assert str(s) == "shared"
    assert str(c) == "shared!"


def test_capacity_granularity():
    assert CowString().capacity == 0
    assert CowString("alamakota").capacity == 32
    assert CowString("x" * 31).capacity == 32
    assert CowString("x" * 32).capacity == 64


def test_clear_unique_keeps_capacity():
    s = CowString("alamakota")
    s.clear()
    assert len(s) == 0
    assert s.capacity == 32


def test_clear_shared_drops_buffer():
    s = CowString("alamakota")
    c = CowString(s)
    c.clear()
    assert len(c) == 0
    assert c.capacity == 0
    assert str(s) == "alamakota"


def test_resize_pads_and_truncates():
    s = CowString("abc")
    s.resize(5)
    assert len(s) == 5
    assert str(s) == "abc\0\0"
    s.resize(2)
    assert str(s) == "ab"


def test_reserve_grows_capacity():
    s = CowString("abc")
    s.reserve(100)
    assert s.capacity == 128
    assert str(s) == "abc"


def test_too_long_string_overflows():
    with pytest.raises(OverflowError):
        CowString("x" * 40000)


def test_index_out_of_range():
    with pytest.raises(IndexError):
        CowString("abc")[3]