"""Integration tests for the custom emoji endpoints."""

import base64

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image"
PNG_B64 = base64.b64encode(PNG_BYTES).decode("ascii")


def upload(client, api_base_url, name="party", content_type="image/png", image_data=PNG_B64):
    return client.post(f"{api_base_url}/emojis", json={
        "name": name, "content_type": content_type, "image_data": image_data,
    })


class TestEmojiApi:

    def test_upload_list_and_serve(self, client, api_base_url):
        response = upload(client, api_base_url, name=":Party:")

        assert response.status_code == 201
        assert response.json()["name"] == "party"
        assert response.json()["size"] == len(PNG_BYTES)
        assert response.json()["url"] == "/api/v1/emojis/party/image"

        listed = client.get(f"{api_base_url}/emojis").json()
        assert [e["name"] for e in listed] == ["party"]

        image = client.get(f"{api_base_url}/emojis/party/image")
        assert image.status_code == 200
        assert image.content == PNG_BYTES
        assert image.headers["content-type"] == "image/png"

    def test_invalid_upload(self, client, api_base_url):
        assert upload(client, api_base_url, content_type="text/html").status_code == 400
        assert upload(client, api_base_url, image_data="%%%").status_code == 400
        assert upload(client, api_base_url, name="x").status_code == 400

    def test_duplicate_upload(self, client, api_base_url):
        upload(client, api_base_url)

        assert upload(client, api_base_url).status_code == 409

    def test_delete(self, client, api_base_url):
        upload(client, api_base_url)

        assert client.delete(f"{api_base_url}/emojis/party").json() == {"success": True}
        assert client.delete(f"{api_base_url}/emojis/party").status_code == 404
        assert client.get(f"{api_base_url}/emojis/party/image").status_code == 404
