import base64
from datetime import date

from nodues.seed import DEFAULT_ASSETS

SIMPLE_PNG_B64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8/5+hHgAHggJ/Pf8icQAAAABJRU5ErkJggg=="


def create_record(client, educator_id="500", name="Test User", **extra):
    payload = {"educatorId": educator_id, "name": name, **extra}
    return client.post("/api/records", json=payload)


def test_root_and_health(client, store):
    assert client.get("/").json()["ok"] is True
    body = client.get("/api/health").json()
    assert body["backend"] == store.backend
    assert body["assetsDegraded"] is False


def test_fetch_certificate_data(client):
    resp = client.get("/api/certificates/131830246")
    assert resp.status_code == 200
    body = resp.json()
    assert body["record"]["name"] == "Mr. Raj Vardhan"
    assert body["record"]["educatorId"] == "131830246"
    assert body["record"]["centreName"] == "Unacademy Centre Samastipur"
    assert body["assets"]["logoUrl"] == DEFAULT_ASSETS.logo_url


def test_fetch_unknown_certificate_returns_404(client):
    resp = client.get("/api/certificates/42")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Record not found for Educator ID: 42"


def test_create_record_applies_boilerplate_defaults(client):
    resp = create_record(client)
    assert resp.status_code == 201
    body = resp.json()
    assert body["educatorId"] == "500"
    assert body["designation"] == "Senior Faculty"
    assert body["signatoryDesignation"] == "Authorized Signatory"
    assert body["issueDate"] == date.today().strftime("%d/%m/%Y")

    fetched = client.get("/api/certificates/500").json()
    assert fetched["record"] == body


def test_create_record_keeps_supplied_fields(client):
    resp = create_record(client, designation="Chemistry Faculty", centreName="Unacademy Centre Patna")
    assert resp.status_code == 201
    record = client.get("/api/certificates/500").json()["record"]
    assert record["designation"] == "Chemistry Faculty"
    assert record["centreName"] == "Unacademy Centre Patna"


def test_create_duplicate_record_returns_409(client):
    resp = create_record(client, educator_id="131830246", name="Someone Else")
    assert resp.status_code == 409
    assert "already exists" in resp.json()["detail"]
    record = client.get("/api/certificates/131830246").json()["record"]
    assert record["name"] == "Mr. Raj Vardhan"


def test_create_record_without_name_returns_422(client):
    resp = create_record(client, name="")
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Educator ID and Name are required."


def test_list_records(client):
    create_record(client, educator_id="600", name="Listed User")
    resp = client.get("/api/records")
    assert resp.status_code == 200
    ids = [r["educatorId"] for r in resp.json()]
    assert sorted(ids) == ["131830246", "600", "999999999"]


def test_patch_assets_merges_fields(client):
    resp = client.patch("/api/assets", json={"watermarkUrl": "https://example.com/wm.png"})
    assert resp.status_code == 200
    assets = client.get("/api/assets").json()
    assert assets["watermarkUrl"] == "https://example.com/wm.png"
    assert assets["logoUrl"] == DEFAULT_ASSETS.logo_url
    assert assets["stampUrl"] == DEFAULT_ASSETS.stamp_url
    assert assets["signatureUrl"] == DEFAULT_ASSETS.signature_url


def test_upload_asset_stores_data_url(client):
    png = base64.b64decode(SIMPLE_PNG_B64)
    resp = client.post(
        "/api/assets/stamp",
        files={"file": ("stamp.png", png, "image/png")},
    )
    assert resp.status_code == 200
    assert resp.json()["stampUrl"] == f"data:image/png;base64,{SIMPLE_PNG_B64}"
    assert resp.json()["logoUrl"] == DEFAULT_ASSETS.logo_url

    certificate = client.get("/api/certificates/999999999").json()
    assert certificate["assets"]["stampUrl"].startswith("data:image/png;base64,")


def test_upload_unknown_asset_kind_is_rejected(client):
    resp = client.post("/api/assets/banner", files={"file": ("b.png", b"x", "image/png")})
    assert resp.status_code == 422


def test_certificate_html_preview(client):
    resp = client.get("/api/certificates/131830246/html")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "131830246" in resp.text
    assert "Senior Mathematics Faculty" in resp.text


def test_certificate_pdf_download(client):
    client.patch(
        "/api/assets",
        json={"logoUrl": "", "stampUrl": "", "watermarkUrl": "", "signatureUrl": ""},
    )
    resp = client.get("/api/certificates/131830246/pdf")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert "no-dues-131830246.pdf" in resp.headers["content-disposition"]
    assert resp.content.startswith(b"%PDF")


def test_certificate_pdf_unknown_id_returns_404(client):
    assert client.get("/api/certificates/nope/pdf").status_code == 404


def test_certificate_pdf_download_with_default_assets(client):
    assert client.get("/api/assets").json()["logoUrl"] == DEFAULT_ASSETS.logo_url
    resp = client.get("/api/certificates/999999999/pdf")
    assert resp.status_code == 200
    assert resp.content.startswith(b"%PDF")
