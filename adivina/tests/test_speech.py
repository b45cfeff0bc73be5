"""
Tests for speech collaborators and cloud recognizer payloads.
"""

import base64
import json

from ..session.speech import (
    QueueRecognizer,
    build_recognize_request,
    extract_transcript,
)


class TestQueueRecognizer:
    """Tests for the canned-utterance recognizer."""

    def test_emits_only_while_listening(self):
        heard = []
        recognizer = QueueRecognizer(["uno", "dos"])
        recognizer.on_recognized(heard.append)

        assert recognizer.pump()
        assert heard == []

        recognizer.start_listening()
        assert recognizer.pump()
        assert heard == ["uno"]

    def test_runs_dry(self):
        recognizer = QueueRecognizer()
        recognizer.start_listening()
        assert not recognizer.pump()

        recognizer.push("tres")
        assert recognizer.pending == 1
        assert recognizer.pump()
        assert recognizer.pending == 0


class TestRecognizeRequest:
    """Tests for speech:recognize request bodies."""

    def test_single_word_mode(self):
        body = build_recognize_request(b"\x00\x01\x02")

        assert body["config"]["languageCode"] == "es-ES"
        assert body["config"]["model"] == "command_and_search"
        context = body["config"]["speechContexts"][0]
        assert context["boost"] == 20
        assert "cien" in context["phrases"]
        assert base64.b64decode(body["audio"]["content"]) == b"\x00\x01\x02"

    def test_free_form_mode(self):
        body = build_recognize_request(b"", language_code="es-MX", single_word_mode=False)

        assert body["config"] == {"languageCode": "es-MX"}
        assert body["audio"]["content"] == ""

    def test_body_is_json_serializable(self):
        assert json.loads(json.dumps(build_recognize_request(b"abc")))


class TestExtractTranscript:
    """Tests for speech:recognize responses."""

    def test_first_transcript(self):
        response = {
            "results": [
                {"alternatives": [{"transcript": " cuarenta y dos ", "confidence": 0.9}]},
                {"alternatives": [{"transcript": "otro"}]},
            ]
        }
        assert extract_transcript(response) == "cuarenta y dos"

    def test_json_string(self):
        raw = json.dumps({"results": [{"alternatives": [{"transcript": "veinte"}]}]})
        assert extract_transcript(raw) == "veinte"

    def test_skips_empty_alternatives(self):
        response = {"results": [{"alternatives": []}, {"alternatives": [{"transcript": "diez"}]}]}
        assert extract_transcript(response) == "diez"

    def test_no_transcript(self):
        assert extract_transcript({}) == ""
        assert extract_transcript({"results": [{}]}) == ""
        assert extract_transcript(None) == ""
        assert extract_transcript("") == ""

    def test_invalid_json(self):
        assert extract_transcript("{not json") == ""
        assert extract_transcript("[1, 2]") == ""
