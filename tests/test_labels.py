"""Label copy generation tests (text model mocked)."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import AsyncClient

from labelcraft.adapters.base import GenerationError
from labelcraft.adapters.gemini import GeminiAdapter
from labelcraft.services.label_service import build_prompt

GEMINI = "labelcraft.services.label_service.gemini"


def test_build_prompt_includes_inputs():
    prompt = build_prompt("summer edition", "iced tea")
    assert '"iced tea"' in prompt
    assert '"summer edition"' in prompt
    assert "under 15 words" in prompt


@pytest.mark.asyncio
async def test_list_labels_empty(client: AsyncClient):
    resp = await client.get("/api/labels/")
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
async def test_generate_label(client: AsyncClient):
    with patch(f"{GEMINI}.generate", new_callable=AsyncMock, return_value="Fresh in every sip") as gen:
        resp = await client.post("/api/labels/", json={"context": "summer", "product_type": "iced tea"})
    assert resp.status_code == 201
    data = resp.json()
    assert data["text"] == "Fresh in every sip"
    assert data["product_type"] == "iced tea"
    assert "iced tea" in gen.await_args.args[0]

    resp = await client.get("/api/labels/")
    assert [label["text"] for label in resp.json()] == ["Fresh in every sip"]


@pytest.mark.asyncio
async def test_generate_label_requires_inputs(client: AsyncClient):
    resp = await client.post("/api/labels/", json={"context": "", "product_type": "tea"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_generate_label_failure(client: AsyncClient):
    with patch(f"{GEMINI}.generate", new_callable=AsyncMock, side_effect=GenerationError("empty")):
        resp = await client.post("/api/labels/", json={"context": "c", "product_type": "p"})
    assert resp.status_code == 502

    resp = await client.get("/api/labels/")
    assert resp.json() == []


# ── GeminiAdapter ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_gemini_missing_api_key():
    adapter = GeminiAdapter(api_key="")
    with patch("labelcraft.adapters.gemini.settings") as s:
        s.gemini_api_key = ""
        with pytest.raises(GenerationError, match="missing"):
            await adapter.generate("hello")


@pytest.mark.asyncio
async def test_gemini_trims_response():
    model = MagicMock()
    model.generate_content_async = AsyncMock(return_value=SimpleNamespace(text="  Crisp & clean \n"))
    with patch("labelcraft.adapters.gemini.genai") as genai:
        genai.GenerativeModel.return_value = model
        text = await GeminiAdapter(model="gemini-test", api_key="k").generate("p")
    assert text == "Crisp & clean"
    genai.configure.assert_called_once_with(api_key="k")
    genai.GenerativeModel.assert_called_once_with("gemini-test")


@pytest.mark.asyncio
async def test_gemini_empty_response():
    model = MagicMock()
    model.generate_content_async = AsyncMock(return_value=SimpleNamespace(text="   "))
    with patch("labelcraft.adapters.gemini.genai") as genai:
        genai.GenerativeModel.return_value = model
        with pytest.raises(GenerationError, match="empty"):
            await GeminiAdapter(api_key="k").generate("p")


@pytest.mark.asyncio
async def test_gemini_request_error_wrapped():
    model = MagicMock()
    model.generate_content_async = AsyncMock(side_effect=RuntimeError("quota"))
    with patch("labelcraft.adapters.gemini.genai") as genai:
        genai.GenerativeModel.return_value = model
        with pytest.raises(GenerationError, match="quota"):
            await GeminiAdapter(api_key="k").generate("p")


@pytest.mark.asyncio
async def test_list_labels_capped_at_page_size(client: AsyncClient):
    with patch(f"{GEMINI}.generate", new_callable=AsyncMock, side_effect=["one", "two", "three"]):
        for product in ("a", "b", "c"):
            resp = await client.post("/api/labels/", json={"context": "ctx", "product_type": product})
            assert resp.status_code == 201

    with patch("labelcraft.services.label_service.settings.labels_page_size", 2):
        resp = await client.get("/api/labels/")
    assert [label["text"] for label in resp.json()] == ["three", "two"]

    resp = await client.get("/api/labels/", params={"limit": 1})
    assert [label["text"] for label in resp.json()] == ["three"]
