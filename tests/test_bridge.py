from patternkit.bridge import EmailMessage, EmergencyEmailMessage, EmergencyWSMessage, WSMessage


def test_websocket_message():
    ws = WSMessage(EmergencyWSMessage(), 100)
    assert ws.notice_user("Miss White ,Let's Drink") == [
        "Websocket Notice User... Miss White ,Let's Drink",
        "Notice User Miss White ,Let's Drink  By Websocket: with Level:  100",
    ]


def test_email_message():
    email = EmailMessage(EmergencyEmailMessage(), 10)
    assert email.notice_user("Fire!") == [
        "Email Notice User... Fire!",
        "Notice User: Fire!  By Email: with Level:  10",
    ]


def test_list_of_messages_report_their_levels():
    ews = EmergencyWSMessage()
    eem = EmergencyEmailMessage()
    messages = [WSMessage(ews, 50), WSMessage(ews, 100), EmailMessage(eem, 10), EmailMessage(eem, 20)]
    last_lines = [message.notice_user("Let’s go for fun")[-1] for message in messages]
    assert [line.rsplit(" ", 1)[-1] for line in last_lines] == ["50", "100", "10", "20"]
    assert [message.priority() for message in messages] == [50, 100, 10, 20]


def test_message_without_handler():
    assert WSMessage(level=1).notice_user("hi") == ["Websocket Notice User... hi"]