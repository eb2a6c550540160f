"""Integration tests for export, import and backup endpoints."""

import json


class TestExport:

    def test_export_attachment(self, client, api_base_url):
        client.post(f"{api_base_url}/events", json={"date": "2025-05-01", "text": "Gym"})

        response = client.get(f"{api_base_url}/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert "attachment; filename=calendar_export_" in response.headers["content-disposition"]
        data = json.loads(response.content)
        assert data["version"] == "1.0"
        assert data["events"]["2025-05-01"][0]["text"] == "Gym"


class TestImport:

    def test_round_trip_replace(self, client, api_base_url, backup_dir):
        client.post(f"{api_base_url}/events", json={"date": "2025-05-01", "text": "Gym"})
        exported = client.get(f"{api_base_url}/export").json()
        client.post(f"{api_base_url}/events", json={"date": "2025-05-02", "text": "Added later"})

        response = client.post(f"{api_base_url}/import", json={"importData": exported, "mergeMode": "replace"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["events_imported"] == 1
        assert (backup_dir / data["backupFile"]).exists()
        assert client.get(f"{api_base_url}/events/2025-05-02").json() == []
        assert [e["text"] for e in client.get(f"{api_base_url}/events/2025-05-01").json()] == ["Gym"]

    def test_merge(self, client, api_base_url):
        client.post(f"{api_base_url}/events", json={"date": "2025-05-01", "text": "Gym"})

        client.post(f"{api_base_url}/import", json={
            "importData": {"events": {"2025-05-01": [{"text": "Imported"}]}},
            "mergeMode": "merge",
        })

        texts = [e["text"] for e in client.get(f"{api_base_url}/events/2025-05-01").json()]
        assert texts == ["Gym", "Imported"]

    def test_invalid_import(self, client, api_base_url):
        response = client.post(f"{api_base_url}/import", json={"importData": {"foo": 1}})

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert "events" in response.json()["error"]

    def test_missing_import_data(self, client, api_base_url):
        response = client.post(f"{api_base_url}/import", json={})

        assert response.status_code == 400

    def test_unknown_merge_mode(self, client, api_base_url):
        response = client.post(f"{api_base_url}/import", json={"importData": {"events": {}}, "mergeMode": "append"})

        assert response.status_code == 422


class TestBackup:

    def test_backup_rotation(self, client, api_base_url, backup_dir):
        names = [client.post(f"{api_base_url}/backup").json()["backupFile"] for _ in range(5)]

        remaining = sorted(p.name for p in backup_dir.iterdir())
        assert len(remaining) == 3
        assert names[-1] in remaining


class TestImportMalformedFields:
    """Wrongly typed snapshot fields never surface as server errors."""

    def test_wrongly_typed_emoji_and_category(self, client, api_base_url):
        response = client.post(f"{api_base_url}/import", json={"importData": {
            "events": {"2025-05-01": [{"text": "Gym", "category": ["work"]}]},
            "emojis": [{"name": 5, "content_type": "image/png", "image_data": "AAAA"}],
        }})

        assert response.status_code == 200
        assert response.json()["events_imported"] == 1
        assert response.json()["emojis_restored"] == 0
        assert client.get(f"{api_base_url}/events/2025-05-01").json()[0]["category"] == "other"
        assert client.get(f"{api_base_url}/emojis").json() == []

    def test_non_string_text_is_a_bad_request(self, client, api_base_url):
        response = client.post(f"{api_base_url}/import", json={
            "importData": {"events": {"2025-05-01": [{"text": ["Gym"]}]}},
        })

        assert response.status_code == 400
        assert response.json()["success"] is False
