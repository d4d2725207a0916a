import json
import os
import shutil
import tempfile
import unittest

from promptslug.core.storage.slug_index import SlugIndex, INDEX_FILENAME


class TestSlugIndex(unittest.TestCase):

    def setUp(self):
        self.workspace = tempfile.mkdtemp()
        self.index = SlugIndex(self.workspace)

    def tearDown(self):
        shutil.rmtree(self.workspace, ignore_errors=True)

    def test_new_index_is_empty(self):
        self.assertFalse(self.index.index_exists())
        self.assertEqual(self.index.get_all_slugs(), {})
        self.assertFalse(self.index.contains("my-post"))

    def test_add_slug_persists(self):
        self.assertTrue(self.index.add_slug("my-post-ab12", "My Post"))
        self.assertTrue(self.index.index_exists())

        with open(os.path.join(self.workspace, INDEX_FILENAME), 'r', encoding='utf-8') as f:
            self.assertEqual(json.load(f), {"my-post-ab12": "My Post"})

        reloaded = SlugIndex(self.workspace)
        self.assertTrue(reloaded.contains("my-post-ab12"))
        self.assertEqual(reloaded.get_source("my-post-ab12"), "My Post")

    def test_add_duplicate_slug_is_rejected(self):
        self.index.add_slug("my-post", "My Post")
        with self.assertLogs('promptslug.core.storage.slug_index', level='WARNING'):
            self.assertFalse(self.index.add_slug("my-post", "Another Post"))
        self.assertEqual(self.index.get_source("my-post"), "My Post")

    def test_remove_slug(self):
        self.index.add_slug("my-post", "My Post")
        self.assertTrue(self.index.remove_slug("my-post"))
        self.assertFalse(SlugIndex(self.workspace).contains("my-post"))
        self.assertFalse(self.index.remove_slug("my-post"))

    def test_get_all_slugs_returns_copy(self):
        self.index.add_slug("my-post", "My Post")
        slugs = self.index.get_all_slugs()
        slugs["other"] = "Other"
        self.assertFalse(self.index.contains("other"))

    def test_corrupt_index_is_treated_as_empty(self):
        with open(os.path.join(self.workspace, INDEX_FILENAME), 'w', encoding='utf-8') as f:
            f.write("{not json")
        index = SlugIndex(self.workspace)
        with self.assertLogs('promptslug.core.storage.slug_index', level='ERROR'):
            self.assertEqual(index.get_all_slugs(), {})

    def test_non_object_index_is_treated_as_empty(self):
        for content in ('["a"]', '"a"', '1'):
            with open(os.path.join(self.workspace, INDEX_FILENAME), 'w', encoding='utf-8') as f:
                f.write(content)
            index = SlugIndex(self.workspace)
            with self.assertLogs('promptslug.core.storage.slug_index', level='ERROR'):
                self.assertIsNone(index.get_source("a"))
            self.assertTrue(index.add_slug("a", "A"))
            self.assertEqual(SlugIndex(self.workspace).get_all_slugs(), {"a": "A"})


if __name__ == '__main__':
    unittest.main()
