"""
Shared fixtures: a fake OpenAI client and real PDFs generated with PyMuPDF.
"""

import json
from types import SimpleNamespace
from unittest.mock import Mock

import fitz
import pytest


def make_completion(content):
    """Build an object shaped like an OpenAI chat completion."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def summary_json(**fields):
    return json.dumps(fields)


def fake_client(*replies):
    """Client whose successive calls return ``replies`` (exceptions are raised)."""
    client = Mock()
    client.chat.completions.create.side_effect = [
        r if isinstance(r, Exception) else make_completion(r) for r in replies
    ]
    return client


def write_pdf(path, pages):
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        page.insert_text((72, 72), text)
    doc.save(str(path))
    doc.close()
    return str(path)


@pytest.fixture
def routing_client():
    """
    Client that answers extraction requests with a summary titled after the
    file and any other request with a fixed group summary.
    """
    def _create(**request):
        user = request["messages"][1]["content"]
        if "response_format" in request:
            filename = user.split("\n", 1)[0].replace("Filename: ", "")
            return make_completion(summary_json(
                title=f"Title of {filename}",
                findings="Something was found",
                keywords=["diabetes", filename],
            ))
        return make_completion("Shared themes across the group.")

    client = Mock()
    client.chat.completions.create.side_effect = _create
    return client


def write_encrypted_pdf(path, pages, password="secret"):
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        page.insert_text((72, 72), text)
    doc.save(
        str(path),
        encryption=fitz.PDF_ENCRYPT_AES_256,
        user_pw=password,
        owner_pw=password + "-owner",
    )
    doc.close()
    return str(path)
