"""Integration tests for the API endpoints."""

import json

import pytest
from fastapi.testclient import TestClient
from document_indexer import main
from document_indexer.main import app, load_seed_documents
from document_indexer.engine_instance import index_engine


class TestAPI:
    """Integration tests for API endpoints."""

    @pytest.fixture(autouse=True)
    def reset_engine(self):
        """Start every test from an empty index."""
        index_engine.clean_all()
        index_engine.reset_stats()
        yield
        index_engine.clean_all()
        index_engine.reset_stats()

    @pytest.fixture
    def client(self):
        """Create a test client."""
        return TestClient(app)

    @pytest.fixture
    def sample_documents(self, client):
        """Register sample documents through the API."""
        documents = {
            "doc1": "hello world",
            "doc2": "hello kotlin",
            "doc3": "Goodbye, World!",
        }
        response = client.post("/api/v1/documents/batch", json={"documents": documents})
        assert response.status_code == 200
        return documents

    def test_root_endpoint(self, client):
        """Test the root endpoint."""
        response = client.get("/")
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "Document Indexer"
        assert data["status"] == "running"

    def test_api_info_endpoint(self, client):
        """Test the API info endpoint."""
        response = client.get("/api")
        assert response.status_code == 200

        data = response.json()
        assert "endpoints" in data
        assert "features" in data
        assert "limits" in data

    def test_register_document(self, client):
        """Test registering a document with a JSON body."""
        response = client.post("/api/v1/documents", json={"name": "doc1", "content": "hello world"})
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "doc1"
        assert data["replaced"] is False

        response = client.get("/api/v1/query/hello")
        assert response.json()["documents"] == ["doc1"]

    def test_register_replaces_document(self, client):
        """Test that registering an existing name replaces its content."""
        client.post("/api/v1/documents", json={"name": "doc1", "content": "hello world"})
        response = client.post("/api/v1/documents", json={"name": "doc1", "content": "goodbye"})

        assert response.json()["replaced"] is True
        assert client.get("/api/v1/query/hello").json()["documents"] == []
        assert client.get("/api/v1/query/goodbye").json()["documents"] == ["doc1"]

    def test_register_empty_name_and_content(self, client):
        """Test that empty names and contents are accepted."""
        response = client.post("/api/v1/documents", json={"name": "", "content": ""})
        assert response.status_code == 200

        response = client.get("/api/v1/documents")
        assert response.json()["documents"] == [""]

    def test_put_document(self, client):
        """Test registering under a name given in the path."""
        response = client.put("/api/v1/documents/doc2", json={"content": "Hello Kotlin"})
        assert response.status_code == 200
        assert response.json()["name"] == "doc2"

        response = client.get("/api/v1/query/kotlin")
        assert response.json()["documents"] == ["doc2"]

    def test_register_missing_content(self, client):
        """Test that a missing or null content is a validation error."""
        response = client.post("/api/v1/documents", json={"name": "doc1"})
        assert response.status_code == 422

        response = client.post("/api/v1/documents", json={"name": "doc1", "content": None})
        assert response.status_code == 422

    def test_register_content_too_long(self, client):
        """Test the content length limit."""
        content = "x" * (main.settings.max_content_length + 1)
        response = client.post("/api/v1/documents", json={"name": "doc1", "content": content})
        assert response.status_code == 400

    def test_batch_register(self, client, sample_documents):
        """Test bulk registration."""
        response = client.get("/api/v1/documents")
        data = response.json()

        assert data["documents"] == sorted(sample_documents)
        assert data["total_documents"] == 3

    def test_batch_register_empty(self, client):
        """Test that an empty batch is rejected."""
        response = client.post("/api/v1/documents/batch", json={"documents": {}})
        assert response.status_code == 422

    def test_get_document(self, client, sample_documents):
        """Test reading a document back."""
        response = client.get("/api/v1/documents/doc3")
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "doc3"
        assert data["content"] == "Goodbye, World!"

    def test_get_document_not_found(self, client):
        """Test reading an unknown document."""
        response = client.get("/api/v1/documents/missing")
        assert response.status_code == 404

    def test_query(self, client, sample_documents):
        """Test word queries."""
        response = client.get("/api/v1/query/hello")
        assert response.status_code == 200

        data = response.json()
        assert data["query"] == "hello"
        assert data["normalized_query"] == "hello"
        assert data["documents"] == ["doc1", "doc2"]
        assert data["total_documents"] == 2

    def test_query_case_insensitive(self, client, sample_documents):
        """Test that case variations return identical documents."""
        results = [
            client.get(f"/api/v1/query/{word}").json()["documents"]
            for word in ["WORLD", "World", "world"]
        ]

        assert results[0] == results[1] == results[2] == ["doc1", "doc3"]

    def test_query_unicode(self, client):
        """Test queries on accented words."""
        client.post("/api/v1/documents", json={"name": "doc1", "content": "Café résumé"})

        response = client.get("/api/v1/query/CAFÉ")
        assert response.json()["documents"] == ["doc1"]

    def test_query_no_match(self, client, sample_documents):
        """Test a query with no matches."""
        response = client.get("/api/v1/query/missing")
        assert response.status_code == 200

        data = response.json()
        assert data["documents"] == []
        assert data["total_documents"] == 0

    def test_query_parameter_empty_word(self, client, sample_documents):
        """Test that the query-string form accepts the empty word."""
        response = client.get("/api/v1/query", params={"word": ""})
        assert response.status_code == 200
        assert response.json()["documents"] == []

    def test_query_parameter(self, client, sample_documents):
        """Test the query-string form."""
        response = client.get("/api/v1/query", params={"word": "Kotlin"})
        assert response.json()["documents"] == ["doc2"]

    def test_query_too_long(self, client):
        """Test the query length limit."""
        long_query = "x" * (main.settings.max_query_length + 1)
        response = client.get(f"/api/v1/query/{long_query}")
        assert response.status_code == 400

    def test_remove_document(self, client, sample_documents):
        """Test removing a document."""
        response = client.delete("/api/v1/documents/doc1")
        assert response.status_code == 200
        assert response.json()["removed"] is True

        response = client.get("/api/v1/query/hello")
        assert response.json()["documents"] == ["doc2"]

    def test_remove_document_not_found(self, client):
        """Test that removing an unknown document is not an error."""
        response = client.delete("/api/v1/documents/nonexistent")
        assert response.status_code == 200
        assert response.json()["removed"] is False

    def test_clean_all(self, client, sample_documents):
        """Test removing every document."""
        response = client.delete("/api/v1/documents")
        assert response.status_code == 200

        assert client.get("/api/v1/documents").json()["total_documents"] == 0
        assert client.get("/api/v1/query/hello").json()["documents"] == []

    def test_health_check(self, client):
        """Test health check endpoint."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == main.settings.app_version
        assert "dependencies" in data

    def test_health_check_probes_store_lock(self, client, monkeypatch):
        """Test that a failing store lookup marks the index store unhealthy."""
        def broken_query(word):
            raise RuntimeError("store unavailable")

        monkeypatch.setattr(index_engine.store, "query", broken_query)

        response = client.get("/api/v1/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["dependencies"]["index_store"] == "unhealthy"

    def test_readiness_and_liveness(self, client, sample_documents):
        """Test orchestration probes."""
        response = client.get("/api/v1/health/ready")
        assert response.status_code == 200
        assert response.json()["index_stats"]["total_documents"] == 3

        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    def test_service_status(self, client):
        """Test the status endpoint."""
        response = client.get("/api/v1/status")
        assert response.status_code == 200

        data = response.json()
        assert data["service"]["name"] == "Document Indexer"
        assert "configuration" in data
        assert "statistics" in data

    def test_metrics_endpoint(self, client, sample_documents):
        """Test metrics endpoint."""
        client.get("/api/v1/query/hello")
        client.get("/api/v1/query/missing")

        response = client.get("/api/v1/metrics")
        assert response.status_code == 200

        data = response.json()
        assert data["total_queries"] == 2
        assert data["hit_rate"] == 50.0
        assert data["total_documents"] == 3
        assert data["memory_usage_mb"] > 0

    def test_detailed_metrics(self, client):
        """Test detailed metrics endpoint."""
        response = client.get("/api/v1/metrics/detailed")
        assert response.status_code == 200

        data = response.json()
        assert "query_metrics" in data
        assert "index_metrics" in data
        assert "system_metrics" in data

    def test_content_type_headers(self, client):
        """Test content type headers."""
        response = client.get("/api/v1/query/hello")
        assert response.headers["content-type"] == "application/json"

    def test_seed_documents_loaded_on_startup(self, tmp_path, monkeypatch):
        """Test that the lifespan registers documents from the seed file."""
        seed_file = tmp_path / "seed.json"
        seed_file.write_text(json.dumps({"seed1": "alpha beta", "seed2": "beta"}), encoding="utf-8")
        monkeypatch.setattr(main.settings, "seed_documents_path", str(seed_file))

        with TestClient(app) as client:
            response = client.get("/api/v1/query/beta")

        assert response.json()["documents"] == ["seed1", "seed2"]

    def test_load_seed_documents_rejects_non_strings(self, tmp_path):
        """Test validation of the seed file."""
        seed_file = tmp_path / "seed.json"
        seed_file.write_text(json.dumps({"doc1": 42}), encoding="utf-8")

        with pytest.raises(ValueError):
            load_seed_documents(str(seed_file))

    def test_load_seed_documents_rejects_list(self, tmp_path):
        """Test that the seed file must hold an object."""
        seed_file = tmp_path / "seed.json"
        seed_file.write_text(json.dumps(["doc1"]), encoding="utf-8")

        with pytest.raises(ValueError):
            load_seed_documents(str(seed_file))
