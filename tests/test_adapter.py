from patternkit.adapter import PowerAdapter, ThreePinPowerSocket, TwoPinPlugin


def test_socket_rejects_two_pin_plug(capsys):
    socket = ThreePinPowerSocket()
    assert socket.three_pin_charging(TwoPinPlugin()) is False
    assert "i can not charge for this type" in capsys.readouterr().out


def test_adapter_charges_two_pin_plug(capsys):
    adapter = PowerAdapter(ThreePinPowerSocket())
    assert adapter.pins() == 0
    assert adapter.plug_charging(TwoPinPlugin()) is True
    assert adapter.pins() == 3
    assert "charging for three pin plug" in capsys.readouterr().out


def test_adapter_ignores_other_plugs():
    class ThreePin:
        def pins(self):
            return 3

    adapter = PowerAdapter(ThreePinPowerSocket())
    assert adapter.plug_charging(ThreePin()) is False
    assert adapter.pins() == 0