#!/usr/bin/env python3
"""
Unit tests for the command line entry point.
"""

import io
import os
import json
import uuid
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import MagicMock, patch

import yaml
from sqlalchemy import create_engine, inspect

import main
from core.config_loader import AppConfig
from core.recommender import InternshipRecord
from database.database import create_session_factory
from tests import add_company, add_internship, add_student, add_application


class TestRankCommand(unittest.TestCase):

    def test_invalid_company_id(self):
        with patch('main.rank_company') as mock_rank:
            self.assertEqual(main.main(["rank", "not-a-uuid"]), 2)
            mock_rank.assert_not_called()

    def test_prints_json(self):
        company_id = str(uuid.uuid4())
        payload = [{"internshipId": "abc", "applicants": []}]
        config = AppConfig()
        out = io.StringIO()

        with patch('main.load_config', return_value=config) as mock_config:
            with patch('main.rank_company', return_value=payload) as mock_rank:
                with redirect_stdout(out):
                    code = main.main(["--config", "custom.yaml", "rank", company_id])

        self.assertEqual(code, 0)
        mock_config.assert_called_once_with("custom.yaml")
        mock_rank.assert_called_once_with(company_id, config)
        self.assertEqual(json.loads(out.getvalue()), payload)

    def test_rank_company_uses_unit_of_work(self):
        company_id = uuid.uuid4()
        repo = MagicMock()
        repo.get_open_internships.return_value = [
            InternshipRecord(internship_id="int-1", title="Backend Intern", skills=["Go"])
        ]
        repo.get_eligible_applications.return_value = {"int-1": []}

        with patch('main.recommendation_uow') as mock_uow:
            mock_uow.return_value.__enter__ = MagicMock(return_value=repo)
            mock_uow.return_value.__exit__ = MagicMock(return_value=False)
            results = main.rank_company(str(company_id), AppConfig())

        repo.get_open_internships.assert_called_once_with(company_id, ['active', 'draft'])
        self.assertEqual(results[0]['internshipTitle'], "Backend Intern")
        self.assertEqual(results[0]['totalApplicants'], 0)


class TestConfiguredDatabase(unittest.TestCase):
    """init-db and rank both use database.url from the --config file."""

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.db_path = Path(self.tmp_dir.name) / "configured.db"
        self.db_url = f"sqlite:///{self.db_path}"
        self.config_path = Path(self.tmp_dir.name) / "alt.yaml"
        self.config_path.write_text(yaml.dump({"database": {"url": self.db_url}}))

        self.env = patch.dict(os.environ)
        self.env.start()
        os.environ.pop("DATABASE_URL", None)

    def tearDown(self):
        self.env.stop()
        self.tmp_dir.cleanup()

    def test_init_db_creates_configured_database(self):
        code = main.main(["--config", str(self.config_path), "init-db"])

        self.assertEqual(code, 0)
        self.assertTrue(self.db_path.exists())
        engine = create_engine(self.db_url)
        try:
            tables = set(inspect(engine).get_table_names())
        finally:
            engine.dispose()
        self.assertTrue({"users", "company", "internship", "application"} <= tables)

    def test_rank_reads_configured_database(self):
        self.assertEqual(main.main(["--config", str(self.config_path), "init-db"]), 0)

        engine = create_engine(self.db_url)
        session = create_session_factory(engine)()
        try:
            company = add_company(session)
            internship = add_internship(session, company, title="Data Intern", skills=["Python"])
            add_application(session, internship, add_student(session, skills=["python"]))
            company_id = str(company.id)
            session.commit()
        finally:
            session.close()
            engine.dispose()

        out = io.StringIO()
        with redirect_stdout(out):
            code = main.main(["--config", str(self.config_path), "rank", company_id])

        self.assertEqual(code, 0)
        payload = json.loads(out.getvalue())
        self.assertEqual(payload[0]['internshipTitle'], "Data Intern")
        self.assertEqual(payload[0]['applicants'][0]['recommendationScore'], 50)


if __name__ == '__main__':
    unittest.main()
