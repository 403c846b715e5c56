import json

from advisor.llm.example_client_adapter import ExampleClientAdapter


class TestExampleClientAdapter:
    def test_read_document_returns_sample_certificate(self) -> None:
        adapter = ExampleClientAdapter()
        text = adapter.read_document(
            model="m", instruction="x", data=b"x", mime_type="image/png"
        )
        assert "Net Salary" in text

    def test_chat_completion_returns_valid_extraction_json(self) -> None:
        adapter = ExampleClientAdapter()
        content = adapter.create_chat_completion(
            model="m",
            temperature=0.0,
            system_prompt="system",
            user_prompt="user",
            json_mode=True,
        )
        assert json.loads(content)["netSalary"] == 18500

    def test_tool_completion_returns_plain_reply(self) -> None:
        adapter = ExampleClientAdapter()
        turn = adapter.create_tool_completion(
            model="m", temperature=0.2, messages=[], tools=[]
        )
        assert turn.content == ExampleClientAdapter.DEFAULT_CHAT_REPLY
        assert turn.tool_calls == []

    def test_overrides(self) -> None:
        adapter = ExampleClientAdapter(
            document_text="", extraction_response="nope", chat_reply="hi"
        )
        assert adapter.read_document(model="m", instruction="", data=b"", mime_type="") == ""
        assert (
            adapter.create_chat_completion(
                model="m", temperature=0, system_prompt="", user_prompt=""
            )
            == "nope"
        )
        assert adapter.create_tool_completion(
            model="m", temperature=0, messages=[], tools=[]
        ).content == "hi"
