"""
Tests for grade mutations and date parsing
"""
from datetime import datetime, timezone as dt_timezone

from django.test import SimpleTestCase

from core.exceptions import InvalidDate
from core.testing import GraphQLTestCase
from grades.models import Grade
from grades.utils import parse_grade_date

ADD_GRADE_MUTATION = """
mutation AddGrade($studentId: ID!, $value: Float!, $date: String!) {
    addGrade(studentId: $studentId, value: $value, date: $date) { id value date }
}
"""

DELETE_GRADE_MUTATION = """
mutation DeleteGrade($id: ID!) {
    deleteGrade(id: $id)
}
"""


class ParseGradeDateTest(SimpleTestCase):

    def test_date_only(self):
        self.assertEqual(
            parse_grade_date('2024-01-01'),
            datetime(2024, 1, 1, tzinfo=dt_timezone.utc)
        )

    def test_datetime_with_offset(self):
        parsed = parse_grade_date('2024-01-01T10:30:00+02:00')
        self.assertEqual(parsed, datetime(2024, 1, 1, 8, 30, tzinfo=dt_timezone.utc))
        self.assertEqual(parsed.isoformat(), '2024-01-01T08:30:00+00:00')

    def test_zulu(self):
        self.assertEqual(
            parse_grade_date('2024-03-05T12:00:00Z'),
            datetime(2024, 3, 5, 12, tzinfo=dt_timezone.utc)
        )

    def test_naive_datetime_is_utc(self):
        parsed = parse_grade_date('2024-01-01T10:00:00')
        self.assertEqual(parsed.utcoffset().total_seconds(), 0)

    def test_invalid(self):
        for value in ('', 'yesterday', '2024-13-01', '2024-02-30'):
            with self.subTest(value=value):
                with self.assertRaises(InvalidDate):
                    parse_grade_date(value)


class GradeMutationTest(GraphQLTestCase):
    """Test addGrade / deleteGrade"""

    def setUp(self):
        super().setUp()
        self.token, self.user = self.register()
        self.student = self.create_student(self.token)

    def add_grade(self, value=85, date='2024-01-01', token=None):
        return self.query(
            ADD_GRADE_MUTATION,
            {'studentId': self.student['id'], 'value': value, 'date': date},
            token=token or self.token,
        )

    def test_add_grade(self):
        _, body = self.add_grade(85, '2024-01-01')

        grade = body['data']['addGrade']
        self.assertEqual(grade['value'], 85.0)
        self.assertTrue(grade['date'].startswith('2024-01-01T00:00:00'))
        self.assertEqual(Grade.objects.get(id=grade['id']).value, 85.0)

    def test_invalid_date(self):
        response, body = self.add_grade(85, 'not a date')

        self.assertGraphQLError(body, 'Invalid date')
        self.assertEqual(response.status_code, 400)
        self.assertFalse(Grade.objects.exists())

    def test_unknown_student(self):
        _, body = self.query(
            ADD_GRADE_MUTATION,
            {'studentId': '9999', 'value': 50, 'date': '2024-01-01'},
            token=self.token,
        )
        self.assertGraphQLError(body, 'Student 9999 not found')

    def test_other_owner(self):
        other_token, _ = self.register(email='bob@example.com')

        response, body = self.add_grade(token=other_token)

        self.assertGraphQLError(body, 'Not authorized')
        self.assertEqual(response.status_code, 403)

    def test_requires_token(self):
        _, body = self.query(
            ADD_GRADE_MUTATION,
            {'studentId': self.student['id'], 'value': 50, 'date': '2024-01-01'},
        )
        self.assertGraphQLError(body, 'Not authenticated')

    def test_delete_twice(self):
        _, body = self.add_grade(70)
        grade_id = body['data']['addGrade']['id']
        self.add_grade(80)

        _, body = self.query(DELETE_GRADE_MUTATION, {'id': grade_id}, token=self.token)
        self.assertTrue(body['data']['deleteGrade'])
        self.assertEqual(list(Grade.objects.values_list('value', flat=True)), [80.0])

        response, body = self.query(DELETE_GRADE_MUTATION, {'id': grade_id}, token=self.token)
        self.assertGraphQLError(body, 'not found')
        self.assertEqual(response.status_code, 404)

    def test_offset_date_is_returned_in_utc(self):
        _, body = self.add_grade(90, '2024-01-01T10:00:00+05:00')
        self.assertEqual(body['data']['addGrade']['date'], '2024-01-01T05:00:00+00:00')

        _, body = self.query('query { students { grades { date } } }')
        self.assertEqual(body['data']['students'][0]['grades'][0]['date'], '2024-01-01T05:00:00+00:00')

    def test_delete_requires_owner(self):
        _, body = self.add_grade(70)
        grade_id = body['data']['addGrade']['id']
        other_token, _ = self.register(email='bob@example.com')

        response, body = self.query(DELETE_GRADE_MUTATION, {'id': grade_id}, token=other_token)

        self.assertGraphQLError(body, 'Not authorized')
        self.assertEqual(response.status_code, 403)
        self.assertTrue(Grade.objects.filter(id=grade_id).exists())

    def test_delete_requires_token(self):
        _, body = self.add_grade(70)
        grade_id = body['data']['addGrade']['id']

        response, body = self.query(DELETE_GRADE_MUTATION, {'id': grade_id})

        self.assertGraphQLError(body, 'Not authenticated')
        self.assertEqual(response.status_code, 401)
        self.assertTrue(Grade.objects.filter(id=grade_id).exists())
