import pytest

from patternkit.simple_factory import SchoolMember, create_member


def test_teacher():
    assert create_member(SchoolMember.TEACHER).say("Tom") == "I am Teacher: Tom"


def test_student():
    assert create_member(SchoolMember.STUDENT).say("Tom") == "I am Student： Tom"


def test_plain_int_kind():
    assert create_member(1).say("Ann") == "I am Teacher: Ann"


def test_unknown_kind():
    with pytest.raises(ValueError):
        create_member(7)