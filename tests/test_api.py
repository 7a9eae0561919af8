"""
Tests for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

import motionlab.api.app as api_app
from motionlab.api.app import ERROR_PAYLOAD, app, get_tutor
from motionlab.classify.backends import FallbackClassifier, KeywordClassifier, LLMClassifier
from motionlab.config import Settings
from motionlab.engine import PhysicsTutor


def _client_with(classifier) -> TestClient:
    tutor = PhysicsTutor(classifier=classifier, settings=Settings(offline=True))
    app.dependency_overrides[get_tutor] = lambda: tutor
    return TestClient(app)


@pytest.fixture(autouse=True)
def clear_overrides():
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return _client_with(KeywordClassifier())


class TestChat:
    """Tests for POST /api/chat."""

    def test_keyword_answer(self, client):
        """Test a spring question returns spring defaults."""
        response = client.post("/api/chat", json={"prompt": "Show me a spring with mass 2kg"})

        assert response.status_code == 200
        data = response.json()
        assert data["module"] == "SpringOscillation"
        assert data["inputs"]["springConstant"] == 10.0
        assert "Hooke" in data["explanation"]

    def test_no_module(self, client):
        """Test an unrelated question returns empty inputs."""
        data = client.post("/api/chat", json={"prompt": "xyz unrelated nonsense"}).json()
        assert data["module"] is None
        assert data["inputs"] == {}

    def test_model_answer(self, mock_provider):
        """Test a model reply is passed through."""
        reply = (
            'Here you go: {"module": "PendulumMotion", "inputs": {"length": 2}, '
            '"explanation": "A 2 m pendulum."}'
        )
        client = _client_with(FallbackClassifier(LLMClassifier(mock_provider(text=reply))))

        data = client.post("/api/chat", json={"prompt": "Show me a pendulum with length 2m"}).json()
        assert data["module"] == "PendulumMotion"
        assert data["inputs"]["length"] == 2.0
        assert data["inputs"]["initialAngle"] == 30.0

    def test_model_failure_falls_back(self, mock_provider):
        """Test a failing model still answers with keywords."""
        provider = mock_provider(error=TimeoutError("deadline exceeded"))
        client = _client_with(FallbackClassifier(LLMClassifier(provider)))

        response = client.post("/api/chat", json={"prompt": "projectile please"})
        assert response.status_code == 200
        assert response.json()["module"] == "ProjectileMotion"

    def test_malformed_body(self, client):
        """Test an unreadable body returns the fixed error payload."""
        response = client.post(
            "/api/chat",
            content="not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 500
        assert response.json() == ERROR_PAYLOAD

    def test_missing_prompt(self, client):
        """Test a body without a prompt returns the fixed error payload."""
        response = client.post("/api/chat", json={"question": "hi"})
        assert response.status_code == 500
        assert response.json() == ERROR_PAYLOAD

    def test_invalid_settings(self, monkeypatch):
        """Test bad settings return the fixed error payload."""
        monkeypatch.setenv("MOTIONLAB_PROVIDER", "bogus")
        monkeypatch.setattr(api_app, "_tutor", None)

        response = TestClient(app).post("/api/chat", json={"prompt": "spring"})

        assert response.status_code == 500
        assert response.json() == ERROR_PAYLOAD
        assert api_app._tutor is None


class TestModules:
    """Tests for module and preset listings."""

    def test_health(self, client):
        """Test the health check."""
        assert client.get("/").json()["status"] == "healthy"

    def test_modules(self, client):
        """Test all four modules are listed with defaults."""
        modules = client.get("/modules").json()
        names = [m["module"] for m in modules]

        assert names == ["ProjectileMotion", "SpringOscillation", "PendulumMotion", "WaveVibration"]
        assert modules[0]["defaults"]["velocity"] == 50.0
        assert modules[3]["trailCapacity"] == 0

    def test_presets(self, client):
        """Test presets by short name."""
        presets = client.get("/modules/projectile/presets").json()
        assert presets[0]["name"] == "Optimal (45°)"
        assert presets[3]["inputs"]["gravity"] == 3.7

    def test_presets_unknown_module(self, client):
        """Test unknown modules are 404."""
        assert client.get("/modules/orbit/presets").status_code == 404


class TestEvaluate:
    """Tests for POST /evaluate."""

    def test_spring(self, client):
        """Test a spring at t = 0."""
        data = client.post("/evaluate", json={"module": "spring", "inputs": {"amplitude": 0.5}}).json()

        assert data["module"] == "SpringOscillation"
        assert data["displacement"] == 0.5
        assert data["regime"] == "underdamped"

    def test_wave_position(self, client):
        """Test the xPos alias."""
        data = client.post(
            "/evaluate",
            json={"module": "WaveVibration", "time": 0.0, "xPos": 0.5},
        ).json()
        # a quarter wavelength along: sin(pi/2)
        assert abs(data["displacement"] - 1.0) < 1e-9

    def test_degenerate_values_are_null(self, client):
        """Test non-finite results serialize as null."""
        data = client.post("/evaluate", json={"module": "spring", "inputs": {"mass": 0}}).json()
        assert data["naturalFrequency"] is None

    def test_huge_velocity(self, client):
        """Test overflowing quantities serialize as null instead of failing."""
        response = client.post(
            "/evaluate",
            json={"module": "projectile", "inputs": {"velocity": 1e200}, "time": 1},
        )

        assert response.status_code == 200
        assert response.json()["extras"]["range"] is None

    def test_errors(self, client):
        """Test unknown modules, bad inputs and negative time."""
        assert client.post("/evaluate", json={"module": "orbit"}).status_code == 404
        assert client.post(
            "/evaluate", json={"module": "spring", "inputs": {"mass": "heavy"}}
        ).status_code == 422
        assert client.post("/evaluate", json={"module": "spring", "time": -1}).status_code == 422


class TestSimulate:
    """Tests for POST /simulate."""

    def test_spring_frames(self, client):
        """Test one frame per tick plus the initial frame."""
        data = client.post("/simulate", json={"module": "spring", "ticks": 10}).json()

        assert data["ticks"] == 10
        assert len(data["frames"]) == 11
        assert data["frames"][0]["time"] == 0.0
        assert abs(data["time"] - 0.5) < 1e-9
        assert data["halted"] is False
        assert len(data["trail"]) == 10

    def test_projectile_halts(self, client):
        """Test a projectile stops at the ground."""
        data = client.post("/simulate", json={"module": "projectile", "ticks": 500}).json()

        assert data["halted"] is True
        assert data["ticks"] == 72
        assert len(data["trail"]) == 20

    def test_wave_profile(self, client):
        """Test wave frames carry the medium profile."""
        data = client.post("/simulate", json={"module": "wave", "ticks": 2}).json()
        assert len(data["frames"][1]["profile"]) == 50
        assert data["trail"] == []
