import unittest

from buildsource.core.policy import BuildRole
from buildsource.core.project import BuildProject
from buildsource.sources.bitbucket import BitBucketSource


class BitBucketSourceTest(unittest.TestCase):
    def test_describe(self):
        source = BitBucketSource("https://bitbucket.org/org/repo.git")

        descriptor = source.describe()

        self.assertEqual(
            descriptor.asdict(),
            {"type": "BITBUCKET", "location": "https://bitbucket.org/org/repo.git"},
        )
        self.assertEqual(descriptor, source.describe())

    def test_bind_is_noop(self):
        role = BuildRole(role_name="test-role")
        project = BuildProject(
            project_name="test-project",
            source=BitBucketSource("https://bitbucket.org/org/repo.git"),
            role=role,
        )

        project.source.bind(project)

        self.assertEqual(role.statements, [])


if __name__ == "__main__":
    unittest.main()
