"""Tests for web.server - layout HTTP / WebSocket API"""

import httpx
import pytest
from fastapi.testclient import TestClient

from panetree.web import create_app


@pytest.fixture
def server():
    return create_app(["a", "b", "c", "d"])


@pytest.fixture
def client(server):
    return TestClient(server.app)


class TestLayoutEndpoints:
    """GET /api/layout*"""

    def test_get_layout(self, client):
        response = client.get("/api/layout")

        assert response.status_code == 200
        data = response.json()
        assert data["slot_ids"] == ["a", "b", "c", "d"]
        assert data["focused_slot_id"] == "a"
        assert data["tree"]["direction"] == "horizontal"
        assert len(data["rects"]) == 4

    def test_get_layout_empty(self):
        client = TestClient(create_app().app)
        assert client.get("/api/layout").json()["tree"] is None

    def test_get_layout_text(self, client):
        response = client.get("/api/layout/text")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "horizontal" in response.text


class TestPaneEndpoints:
    """POST /api/panes, DELETE /api/panes/{slot_id}"""

    def test_open_pane(self, client, server):
        response = client.post(
            "/api/panes", json={"slot_id": "e", "target_slot_id": "d", "direction": "horizontal"}
        )

        assert response.json() == {"success": True, "message": "Pane opened"}
        assert server.workspace.slot_ids == ["a", "b", "c", "d", "e"]

    def test_open_duplicate(self, client, server):
        response = client.post("/api/panes", json={"slot_id": "b"})

        assert response.json()["success"] is False
        assert server.workspace.slot_ids == ["a", "b", "c", "d"]

    def test_open_invalid_direction(self, client):
        response = client.post("/api/panes", json={"slot_id": "e", "direction": "diagonal"})
        assert response.status_code == 422

    def test_close_pane(self, client, server):
        response = client.delete("/api/panes/a")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert server.workspace.slot_ids == ["b", "c", "d"]

    def test_close_missing(self, client):
        response = client.delete("/api/panes/zzz")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Pane not found: zzz"}


class TestRatioEndpoint:
    """POST /api/ratio"""

    def test_update_ratio(self, client, server):
        root_id = server.workspace.tree.id
        response = client.post("/api/ratio", json={"node_id": root_id, "ratio": 0.3})

        assert response.json()["success"] is True
        assert server.workspace.tree.ratio == 0.3

    def test_stale_node(self, client):
        response = client.post("/api/ratio", json={"node_id": "node-0-0", "ratio": 0.3})
        assert response.json()["success"] is False

    @pytest.mark.parametrize("ratio", [0.0, 1.0, -0.5, 1.5])
    def test_out_of_range_rejected(self, client, server, ratio):
        response = client.post("/api/ratio", json={"node_id": server.workspace.tree.id, "ratio": ratio})
        assert response.status_code == 422


class TestFocusEndpoint:
    """POST /api/focus"""

    def test_focus_index(self, client, server):
        response = client.post("/api/focus", json={"index": 4})

        assert response.json() == {"success": True, "message": "d"}
        assert server.workspace.focused_slot_id == "d"

    def test_focus_sibling(self, client, server):
        response = client.post("/api/focus", json={"sibling": True})

        assert response.json()["message"] == "b"

    def test_focus_slot(self, client, server):
        assert client.post("/api/focus", json={"slot_id": "c"}).json()["success"] is True
        assert server.workspace.focused_slot_id == "c"

    def test_focus_out_of_range(self, client):
        assert client.post("/api/focus", json={"index": 7}).json()["success"] is False

    def test_focus_without_target(self, client):
        response = client.post("/api/focus", json={})
        assert response.json() == {"success": False, "message": "No focus target given"}


class TestGridEndpoint:
    """POST /api/grid"""

    def test_reset_grid(self, client, server):
        response = client.post("/api/grid", json={"slot_ids": ["x", "y", "z"]})

        assert response.json()["success"] is True
        assert server.workspace.slot_ids == ["x", "y", "z"]

    def test_duplicates_rejected(self, client, server):
        response = client.post("/api/grid", json={"slot_ids": ["x", "x"]})

        assert response.json()["success"] is False
        assert server.workspace.slot_ids == ["a", "b", "c", "d"]


class TestWebSocket:
    """WS /ws"""

    def test_initial_layout(self, client):
        with client.websocket_connect("/ws") as ws:
            data = ws.receive_json()
            assert data["slot_ids"] == ["a", "b", "c", "d"]

    def test_focus_message(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.send_text("focus:2")

            result = ws.receive_json()
            assert result == {"type": "focus_result", "slot_id": "b", "success": True}
            assert ws.receive_json()["focused_slot_id"] == "b"

    def test_split_and_close_messages(self, client, server):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()

            ws.send_json({"action": "split", "slot_id": "e", "target_slot_id": "a"})
            assert ws.receive_json() == {"type": "split_result", "slot_id": "e", "success": True}
            assert ws.receive_json()["slot_ids"] == ["a", "e", "b", "c", "d"]

            ws.send_text("close:e")
            assert ws.receive_json() == {"type": "close_result", "slot_id": "e", "success": True}
            assert ws.receive_json()["slot_ids"] == ["a", "b", "c", "d"]

    def test_resize_message(self, client, server):
        root_id = server.workspace.tree.id
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.send_json({"action": "resize", "node_id": root_id, "ratio": 0.6})

            assert ws.receive_json()["success"] is True
            assert ws.receive_json()["tree"]["ratio"] == 0.6

    @pytest.mark.parametrize("ratio", [1.5, 0.0, -0.2, "wide"])
    def test_resize_message_invalid_ratio(self, client, server, ratio):
        root_id = server.workspace.tree.id
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.send_json({"action": "resize", "node_id": root_id, "ratio": ratio})

            assert ws.receive_json() == {"type": "resize_result", "node_id": root_id, "success": False}
        assert server.workspace.tree.ratio == 0.5

    def test_resize_message_missing_node_id(self, client, server):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.send_json({"action": "resize", "ratio": 0.6})

            assert ws.receive_json() == {"type": "resize_result", "node_id": None, "success": False}

    def test_malformed_split_keeps_connection(self, client, server):
        """缺字段的 split 消息只返回失败，连接继续可用"""
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            assert len(server.clients) == 1

            ws.send_json({"action": "split"})
            assert ws.receive_json() == {"type": "split_result", "slot_id": None, "success": False}

            ws.send_json({"action": "split", "slot_id": "e", "direction": "diagonal"})
            assert ws.receive_json() == {"type": "split_result", "slot_id": "e", "success": False}

            ws.send_text("focus:2")
            assert ws.receive_json()["success"] is True
            assert ws.receive_json()["focused_slot_id"] == "b"

        assert server.workspace.slot_ids == ["a", "b", "c", "d"]
        assert server.clients == []

    def test_broadcast_on_http_change(self, server):
        # 共享同一个事件循环
        with TestClient(server.app) as client:
            with client.websocket_connect("/ws") as ws:
                ws.receive_json()
                client.delete("/api/panes/d")
                assert ws.receive_json()["slot_ids"] == ["a", "b", "c"]


@pytest.mark.anyio
async def test_async_client(server):
    """ASGI 直连调用"""
    transport = httpx.ASGITransport(app=server.app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/api/panes", json={"slot_id": "e"})
        assert response.json()["success"] is True

        layout = (await client.get("/api/layout")).json()
        assert layout["slot_ids"] == ["a", "e", "b", "c", "d"]
        assert layout["focused_slot_id"] == "e"
