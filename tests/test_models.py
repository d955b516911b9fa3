import pytest
from pydantic import ValidationError

from gemini_chat.models import ChatRequest, Message, Reply


def test_message_stores_role_and_content():
    m = Message(role="user", content="hello")
    assert m.role == "user"
    assert m.content == "hello"


def test_message_assistant_role():
    m = Message(role="assistant", content="world")
    assert m.role == "assistant"


def test_message_rejects_other_roles():
    with pytest.raises(ValidationError):
        Message(role="system", content="nope")


def test_message_is_immutable():
    m = Message(role="user", content="hello")
    with pytest.raises(ValidationError):
        m.content = "changed"


def test_chat_request_stores_message():
    assert ChatRequest(message="hi").model_dump() == {"message": "hi"}


def test_chat_request_allows_empty_message():
    assert ChatRequest(message="").message == ""


def test_reply_reads_wire_alias():
    reply = Reply.model_validate(
        {"message": {"role": "assistant", "content": "hi"}, "conversationId": "abc"}
    )
    assert reply.conversation_id == "abc"
    assert reply.message == Message(role="assistant", content="hi")


def test_reply_accepts_field_name():
    reply = Reply(message=Message(role="user", content="x"), conversation_id="c1")
    assert reply.conversation_id == "c1"


def test_reply_dumps_with_alias():
    reply = Reply(message=Message(role="assistant", content="hi"), conversation_id="abc")
    assert reply.model_dump(by_alias=True) == {
        "message": {"role": "assistant", "content": "hi"},
        "conversationId": "abc",
    }


def test_reply_requires_conversation_id():
    with pytest.raises(ValidationError):
        Reply.model_validate({"message": {"role": "assistant", "content": "hi"}})


def test_reply_is_immutable():
    reply = Reply(message=Message(role="assistant", content="hi"), conversation_id="abc")
    with pytest.raises(ValidationError):
        reply.conversation_id = "other"
