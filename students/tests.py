"""
Tests for student queries and mutations
"""
from django.utils import timezone

from assignment.models import Assignment
from core.testing import GraphQLTestCase
from grades.models import Grade
from predictions.models import Prediction
from students.models import Student

UPDATE_STUDENT_MUTATION = """
mutation UpdateStudent($id: ID!, $name: String!) {
    updateStudent(id: $id, name: $name) { id name }
}
"""

DELETE_STUDENT_MUTATION = """
mutation DeleteStudent($id: ID!) {
    deleteStudent(id: $id)
}
"""


class CreateStudentTest(GraphQLTestCase):

    def setUp(self):
        super().setUp()
        self.token, self.user = self.register()

    def test_create_student(self):
        student = self.create_student(self.token, name='S1')

        self.assertEqual(student['name'], 'S1')
        self.assertEqual(student['user']['id'], self.user['id'])
        self.assertTrue(Student.objects.filter(id=student['id'], user_id=self.user['id']).exists())

    def test_requires_token(self):
        response, body = self.query('mutation { createStudent(name: "S1") { id } }')

        self.assertGraphQLError(body, 'Not authenticated')
        self.assertEqual(response.status_code, 401)
        self.assertFalse(Student.objects.exists())


class StudentsQueryTest(GraphQLTestCase):

    def test_students_is_public_and_nested(self):
        token, user = self.register()
        student = self.create_student(token, name='S1')
        obj = Student.objects.get(id=student['id'])
        Grade.objects.create(student=obj, value=85, date=timezone.now())
        Assignment.objects.create(student=obj, file_url='https://files.example.com/a.pdf')
        Prediction.objects.create(student=obj, predicted_grade=90, feedback='Good')

        _, body = self.query("""
            query {
                students {
                    id name
                    user { email }
                    grades { value date }
                    assignments { fileUrl submittedAt }
                    predictions { predictedGrade feedback createdAt }
                }
            }
        """)

        [result] = body['data']['students']
        self.assertEqual(result['name'], 'S1')
        self.assertEqual(result['user']['email'], 'ann@example.com')
        self.assertEqual(result['grades'][0]['value'], 85.0)
        self.assertEqual(result['assignments'][0]['fileUrl'], 'https://files.example.com/a.pdf')
        self.assertEqual(result['predictions'][0]['feedback'], 'Good')
        self.assertIsInstance(result['assignments'][0]['submittedAt'], str)


class UpdateStudentTest(GraphQLTestCase):

    def setUp(self):
        super().setUp()
        self.token, self.user = self.register()
        self.student = self.create_student(self.token, name='S1')

    def test_rename(self):
        _, body = self.query(UPDATE_STUDENT_MUTATION, {'id': self.student['id'], 'name': 'S2'}, token=self.token)

        self.assertEqual(body['data']['updateStudent']['name'], 'S2')
        self.assertEqual(Student.objects.get(id=self.student['id']).name, 'S2')

    def test_unknown_id(self):
        response, body = self.query(UPDATE_STUDENT_MUTATION, {'id': '9999', 'name': 'S2'}, token=self.token)

        self.assertGraphQLError(body, 'Student 9999 not found')
        self.assertEqual(response.status_code, 404)

    def test_malformed_id(self):
        _, body = self.query(UPDATE_STUDENT_MUTATION, {'id': 'abc', 'name': 'S2'}, token=self.token)
        self.assertGraphQLError(body, 'not found')

    def test_other_owner(self):
        other_token, _ = self.register(email='bob@example.com')

        response, body = self.query(UPDATE_STUDENT_MUTATION, {'id': self.student['id'], 'name': 'S2'}, token=other_token)

        self.assertGraphQLError(body, 'Not authorized')
        self.assertEqual(response.status_code, 403)
        self.assertEqual(Student.objects.get(id=self.student['id']).name, 'S1')


class DeleteStudentTest(GraphQLTestCase):

    def setUp(self):
        super().setUp()
        self.token, self.user = self.register()
        self.student = self.create_student(self.token, name='S1')
        self.other = self.create_student(self.token, name='S2')

    def test_delete_twice(self):
        _, body = self.query(DELETE_STUDENT_MUTATION, {'id': self.student['id']}, token=self.token)
        self.assertTrue(body['data']['deleteStudent'])
        self.assertEqual(list(Student.objects.values_list('name', flat=True)), ['S2'])

        response, body = self.query(DELETE_STUDENT_MUTATION, {'id': self.student['id']}, token=self.token)
        self.assertGraphQLError(body, 'not found')
        self.assertEqual(response.status_code, 404)

    def test_delete_cascades(self):
        obj = Student.objects.get(id=self.student['id'])
        Grade.objects.create(student=obj, value=70, date=timezone.now())
        Assignment.objects.create(student=obj, file_url='https://files.example.com/a.pdf')
        Prediction.objects.create(student=obj, predicted_grade=75, feedback='ok')

        self.query(DELETE_STUDENT_MUTATION, {'id': self.student['id']}, token=self.token)

        self.assertFalse(Grade.objects.exists())
        self.assertFalse(Assignment.objects.exists())
        self.assertFalse(Prediction.objects.exists())

    def test_other_owner(self):
        other_token, _ = self.register(email='bob@example.com')

        _, body = self.query(DELETE_STUDENT_MUTATION, {'id': self.student['id']}, token=other_token)

        self.assertGraphQLError(body, 'Not authorized')
        self.assertTrue(Student.objects.filter(id=self.student['id']).exists())

    def test_requires_token(self):
        _, body = self.query(DELETE_STUDENT_MUTATION, {'id': self.student['id']})
        self.assertGraphQLError(body, 'Not authenticated')
