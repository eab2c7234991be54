import unittest

from django.apps import apps
from rest_framework.test import APIClient, APISimpleTestCase

from taskboard.tests.testcontainers.shared_mongo import docker_available, get_shared_mongo_container
from taskboard_project.db.config import DatabaseManager


@unittest.skipUnless(docker_available(), "Docker is required to run MongoDB integration tests")
class BaseMongoTestCase(APISimpleTestCase):
    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        cls.mongo_container = get_shared_mongo_container()
        cls.mongo_url = cls.mongo_container.get_connection_url()
        cls.database_manager = DatabaseManager(cls.mongo_url, "testdb")
        cls.db = cls.database_manager.get_database()

        cls.app_config = apps.get_app_config("taskboard")
        cls.original_database_manager = cls.app_config.database_manager
        cls.app_config.database_manager = cls.database_manager

    def setUp(self):
        self.client = APIClient()
        for collection in self.db.list_collection_names():
            self.db[collection].delete_many({})

    @classmethod
    def tearDownClass(cls):
        cls.app_config.database_manager = cls.original_database_manager
        cls.database_manager.close()
        super().tearDownClass()
