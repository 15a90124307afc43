import pytest

from app.models.inputs import ParsedArchitecture, SiteInputs
from app.services.schemes import base_assumptions, generate_scheme_options

SCHEME_IDS = ["scheme-rc-flat-slab", "scheme-composite-steel"]


class TestSchemeGenerator:
    def test_blank_site_inputs_render_as_not_set(self):
        lines = base_assumptions(SiteInputs())

        assert len(lines) == 8
        assert lines[0] == "Design basis: Eurocodes with national annex: NOT SET."
        assert lines[2] == "Soil type (user input): NOT SET."

    def test_site_inputs_coerce_to_text(self):
        site = SiteInputs.model_validate({"soilType": None, "windZone": 2, "seismicZone": 0.1})

        assert (site.soil_type, site.wind_zone, site.seismic_zone) == ("", "2", "0.1")

    def test_site_inputs_are_interpolated(self):
        lines = base_assumptions(SiteInputs(wind_zone="Zone 3", importance_class="III"))

        assert "Wind zone (user input): Zone 3." in lines
        assert "Importance class: III." in lines

    def test_two_schemes_in_fixed_order(self):
        schemes = generate_scheme_options(ParsedArchitecture(), SiteInputs())

        assert [s.id for s in schemes] == SCHEME_IDS

    def test_beam_uses_first_span_id(self):
        architecture = ParsedArchitecture.model_validate(
            {"spans": [{"id": "span-X", "description": "d", "direction": "y", "length_m": 6, "level": "L3"}]}
        )

        for scheme in generate_scheme_options(architecture, SiteInputs()):
            assert scheme.members[0].member_id == "span-X"

    def test_beam_id_defaults_without_spans(self):
        for scheme in generate_scheme_options(ParsedArchitecture(), SiteInputs()):
            assert scheme.members[0].member_id == "span-1"

    def test_scheme_specific_assumptions(self):
        rc, steel = generate_scheme_options(ParsedArchitecture(), SiteInputs())

        assert len(rc.key_assumptions) == len(steel.key_assumptions) == 10
        assert rc.key_assumptions[-2] == "Frame and slabs designed to EN 1992-1-1 (not yet implemented)."
        assert steel.key_assumptions[-1] == "Composite slabs designed to EN 1994-1-1 (not yet implemented)."

    def test_member_ids(self):
        rc, steel = generate_scheme_options(ParsedArchitecture(), SiteInputs())

        assert [m.member_id for m in rc.members[1:]] == ["col-typ-1", "slab-typ-1"]
        assert [m.member_id for m in steel.members[1:]] == ["col-typ-2", "slab-typ-2"]
        assert [m.member_type for m in rc.members] == ["beam", "column", "slab"]


class TestGenerateSchemesEndpoint:
    def test_returns_two_schemes(self, client, architecture_payload, site_inputs_payload):
        response = client.post(
            "/api/generate-schemes",
            json={"architecture": architecture_payload, "siteInputs": site_inputs_payload},
        )

        assert response.status_code == 200
        schemes = response.json()["schemes"]
        assert [s["id"] for s in schemes] == SCHEME_IDS
        assert schemes[0]["members"][0]["memberId"] == "span-L1-01"
        assert "Soil type (user input): C (dense sand)." in schemes[0]["keyAssumptions"]

    def test_members_are_placeholders(self, client, architecture_payload, site_inputs_payload):
        response = client.post(
            "/api/generate-schemes",
            json={"architecture": architecture_payload, "siteInputs": site_inputs_payload},
        )

        members = [m for s in response.json()["schemes"] for m in s["members"]]
        assert len(members) == 6
        for member in members:
            assert member["utilisationRatio"] is None
            assert len(member["warnings"]) >= 1

    def test_empty_site_inputs_are_accepted(self, client, architecture_payload):
        response = client.post(
            "/api/generate-schemes",
            json={"architecture": architecture_payload, "siteInputs": {}},
        )

        assert response.status_code == 200
        assert "Wind zone (user input): NOT SET." in response.json()["schemes"][1]["keyAssumptions"]

    @pytest.mark.parametrize(
        "field, value, expected",
        [
            ("seismicZone", None, "Seismic zone (user input): NOT SET."),
            ("windZone", 2, "Wind zone (user input): 2."),
        ],
    )
    def test_site_inputs_take_any_scalar(
        self, client, architecture_payload, site_inputs_payload, field, value, expected
    ):
        site_inputs_payload[field] = value

        response = client.post(
            "/api/generate-schemes",
            json={"architecture": architecture_payload, "siteInputs": site_inputs_payload},
        )

        assert response.status_code == 200
        for scheme in response.json()["schemes"]:
            assert expected in scheme["keyAssumptions"]

    def test_storeys_is_not_range_checked(self, client, architecture_payload, site_inputs_payload):
        architecture_payload["storeys"] = -1

        response = client.post(
            "/api/generate-schemes",
            json={"architecture": architecture_payload, "siteInputs": site_inputs_payload},
        )

        assert response.status_code == 200

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"siteInputs": {}},
            {"architecture": {}},
            {"architecture": None, "siteInputs": {}},
        ],
    )
    def test_missing_inputs_are_rejected(self, client, body):
        response = client.post("/api/generate-schemes", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "architecture and siteInputs must be provided."

    def test_malformed_architecture_is_rejected(self, client, site_inputs_payload):
        response = client.post(
            "/api/generate-schemes",
            json={"architecture": {"spans": [{"id": "s"}]}, "siteInputs": site_inputs_payload},
        )

        assert response.status_code == 400
        body = response.json()
        assert "error" in body
        assert body["details"]

    def test_invalid_json_is_rejected(self, client):
        response = client.post(
            "/api/generate-schemes",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "error" in response.json()

    @pytest.mark.parametrize("method", ["get", "put", "delete"])
    def test_other_methods_are_not_allowed(self, client, method):
        response = getattr(client, method)("/api/generate-schemes")

        assert response.status_code == 405
        assert "error" in response.json()
