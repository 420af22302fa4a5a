import pytest

from crimespotter.errors import BadRequest
from crimespotter.services.contact import SUCCESS_MESSAGE, sanitize_contact, submit_contact


def test_sanitize_strips_angle_brackets_and_truncates():
    submission = sanitize_contact(
        name="<b>Alex</b>" + "x" * 200,
        email="alex@example.co.uk",
        subject="Hello <script>",
        message="m" * 6000,
    )

    assert "<" not in submission.name and ">" not in submission.name
    assert submission.name.startswith("bAlex/b")
    assert len(submission.name) <= 100
    assert submission.subject == "Hello script"
    assert len(submission.message) == 5000


@pytest.mark.parametrize("missing", ["name", "email", "subject", "message"])
def test_all_fields_are_required(missing):
    fields = {"name": "Alex", "email": "alex@example.com", "subject": "Hi", "message": "Hello"}
    fields[missing] = ""

    with pytest.raises(BadRequest, match="All fields are required"):
        sanitize_contact(**fields)


@pytest.mark.parametrize("email", ["not-an-email", "a@b", "a b@example.com", "@example.com"])
def test_invalid_email_is_rejected(email):
    with pytest.raises(BadRequest, match="Invalid email address"):
        sanitize_contact(name="Alex", email=email, subject="Hi", message="Hello")


def test_submit_contact_logs_submission(caplog):
    with caplog.at_level("INFO", logger="crimespotter.services.contact"):
        message = submit_contact("Alex", "alex@example.com", "Data question", "Hello there")

    assert message == SUCCESS_MESSAGE
    assert "alex@example.com" in caplog.text
    assert "Hello there" not in caplog.text
