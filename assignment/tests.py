"""
Tests for Assignment mutations
"""
from core.testing import GraphQLTestCase
from assignment.models import Assignment

CREATE_ASSIGNMENT_MUTATION = """
mutation CreateAssignment($studentId: ID!, $fileUrl: String!) {
    createAssignment(studentId: $studentId, fileUrl: $fileUrl) { id fileUrl submittedAt }
}
"""

DELETE_ASSIGNMENT_MUTATION = """
mutation DeleteAssignment($id: ID!) {
    deleteAssignment(id: $id)
}
"""


class AssignmentMutationTest(GraphQLTestCase):
    """Test createAssignment / deleteAssignment"""

    def setUp(self):
        super().setUp()
        self.token, self.user = self.register()
        self.student = self.create_student(self.token)

    def create_assignment(self, url='https://files.example.com/essay.pdf'):
        _, body = self.query(
            CREATE_ASSIGNMENT_MUTATION,
            {'studentId': self.student['id'], 'fileUrl': url},
            token=self.token,
        )
        return body['data']['createAssignment']

    def test_create_assignment(self):
        assignment = self.create_assignment()

        self.assertEqual(assignment['fileUrl'], 'https://files.example.com/essay.pdf')
        self.assertTrue(assignment['submittedAt'])
        stored = Assignment.objects.get(id=assignment['id'])
        self.assertEqual(str(stored.student_id), self.student['id'])

    def test_create_for_unknown_student(self):
        response, body = self.query(
            CREATE_ASSIGNMENT_MUTATION,
            {'studentId': '9999', 'fileUrl': 'https://files.example.com/x.pdf'},
            token=self.token,
        )

        self.assertGraphQLError(body, 'Student 9999 not found')
        self.assertEqual(response.status_code, 404)

    def test_create_for_other_users_student(self):
        other_token, _ = self.register(email='bob@example.com')

        response, body = self.query(
            CREATE_ASSIGNMENT_MUTATION,
            {'studentId': self.student['id'], 'fileUrl': 'https://files.example.com/x.pdf'},
            token=other_token,
        )

        self.assertGraphQLError(body, 'Not authorized')
        self.assertEqual(response.status_code, 403)
        self.assertFalse(Assignment.objects.exists())

    def test_delete_twice(self):
        first = self.create_assignment()
        second = self.create_assignment('https://files.example.com/other.pdf')

        _, body = self.query(DELETE_ASSIGNMENT_MUTATION, {'id': first['id']}, token=self.token)
        self.assertTrue(body['data']['deleteAssignment'])
        self.assertEqual(list(Assignment.objects.values_list('id', flat=True)), [int(second['id'])])

        response, body = self.query(DELETE_ASSIGNMENT_MUTATION, {'id': first['id']}, token=self.token)
        self.assertGraphQLError(body, 'not found')
        self.assertEqual(response.status_code, 404)

    def test_delete_requires_owner(self):
        assignment = self.create_assignment()
        other_token, _ = self.register(email='bob@example.com')

        _, body = self.query(DELETE_ASSIGNMENT_MUTATION, {'id': assignment['id']}, token=other_token)

        self.assertGraphQLError(body, 'Not authorized')
        self.assertTrue(Assignment.objects.filter(id=assignment['id']).exists())

    def test_delete_requires_token(self):
        assignment = self.create_assignment()

        response, body = self.query(DELETE_ASSIGNMENT_MUTATION, {'id': assignment['id']})

        self.assertGraphQLError(body, 'Not authenticated')
        self.assertEqual(response.status_code, 401)
        self.assertTrue(Assignment.objects.filter(id=assignment['id']).exists())
