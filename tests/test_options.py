from patternkit.options import Options, company, gender, gid, introduce, uid


def test_defaults_without_options(capsys):
    assert introduce("nobody") == Options(uid=0, gid=0, flags=0, company="", gender=True)
    assert "gender:  male" in capsys.readouterr().out


def test_tom(capsys):
    opts = introduce("tom", gender(True), company("land company"))
    assert opts.company == "land company"
    assert opts.gender is True
    out = capsys.readouterr().out
    assert "im am:  tom" in out
    assert "from:  land company" in out


def test_lily():
    opts = introduce("lily", company("sky commnay"), uid(123))
    assert opts.company == "sky commnay"
    assert opts.uid == 123


def test_admin(capsys):
    opts = introduce("admin", company("risky commnay"), uid(883))
    assert opts.uid == 883
    assert "UID:  883" in capsys.readouterr().out


def test_female_and_gid(capsys):
    opts = introduce("kate", gender(False), gid(7))
    assert opts.gid == 7
    assert "gender:  female" in capsys.readouterr().out


def test_later_option_wins():
    assert introduce("x", uid(1), uid(2)).uid == 2