"""Tests for the result encoder and envelopes."""

import base64

import pytest

from greeting_mcp.server.encoder import (
    Envelope,
    ImageArtifact,
    ImageBlock,
    MessageBlock,
    PromptMessage,
    TextBlock,
    encode,
    error_envelope,
    success_envelope,
)
from greeting_mcp.server.errors import MissingParameterError


class TestEncode:
    def test_text(self):
        assert encode("hello") == [TextBlock("hello")]

    def test_image(self):
        blocks = encode(ImageArtifact(b"\x89PNG", "image/png"))
        assert blocks == [ImageBlock(base64.b64encode(b"\x89PNG").decode(), "image/png")]
        assert blocks[0].to_dict() == {
            "type": "image",
            "data": "iVBORw==",
            "mimeType": "image/png",
        }

    def test_messages_keep_order(self):
        blocks = encode([PromptMessage("user", "one"), PromptMessage("assistant", "two")])
        assert [b.role for b in blocks] == ["user", "assistant"]
        assert blocks[0].to_dict() == {"role": "user", "content": {"type": "text", "text": "one"}}

    def test_single_message(self):
        assert encode(PromptMessage("user", "x")) == [MessageBlock("user", TextBlock("x"))]

    @pytest.mark.parametrize("bad", [None, 42, [], {"a": 1}])
    def test_unsupported(self, bad):
        with pytest.raises(TypeError):
            encode(bad)


class TestEnvelope:
    def test_needs_a_block(self):
        with pytest.raises(ValueError):
            Envelope(1, [])

    def test_tool_result(self):
        env = success_envelope(7, "done")
        assert env.request_id == 7
        assert env.to_tool_result() == {"content": [{"type": "text", "text": "done"}]}

    def test_image_annotations(self):
        env = success_envelope(1, ImageArtifact(b"x", annotations={"priority": 0.9}))
        result = env.to_tool_result()
        assert result["annotations"] == {"priority": 0.9}
        assert result["content"][0]["type"] == "image"

    def test_error_envelope(self):
        env = error_envelope(3, "invalid_arguments", MissingParameterError("name"))
        assert env.is_error
        assert env.error_kind == "invalid_arguments"
        assert env.text == "Error [invalid_arguments]: Missing required parameter 'name'"
        assert env.to_tool_result()["isError"] is True

    def test_prompt_result(self):
        env = success_envelope(1, [PromptMessage("user", "review this")])
        result = env.to_prompt_result("Review")
        assert result["description"] == "Review"
        assert result["messages"][0]["content"]["text"] == "review this"

    def test_resource_result(self):
        env = success_envelope(1, "# Doc")
        assert env.to_resource_result("doc://a", "text/markdown") == {
            "contents": [{"uri": "doc://a", "mimeType": "text/markdown", "text": "# Doc"}],
        }
