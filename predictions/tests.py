"""
Tests for the prediction client and the createPrediction mutation
"""
import json
from datetime import datetime, timezone as dt_timezone

import httpx
from django.test import SimpleTestCase, TestCase, override_settings

from core.exceptions import UpstreamError
from core.models import User
from core.testing import FakePredictionClient, GraphQLTestCase
from grades.models import Grade
from predictions.client import (
    HttpPredictionClient,
    PredictionResult,
    build_prediction_client,
    parse_prediction_response,
)
from predictions.models import Prediction
from predictions.utils import build_prediction_payload
from students.models import Student

CREATE_PREDICTION_MUTATION = """
mutation CreatePrediction($studentId: ID!) {
    createPrediction(studentId: $studentId) { id predictedGrade feedback createdAt }
}
"""

ADD_GRADE_MUTATION = """
mutation AddGrade($studentId: ID!, $value: Float!, $date: String!) {
    addGrade(studentId: $studentId, value: $value, date: $date) { id value date }
}
"""

PREDICT_URL = 'http://predictor.test/predict'


def mock_client(handler):
    return HttpPredictionClient(PREDICT_URL, transport=httpx.MockTransport(handler))


class HttpPredictionClientTest(SimpleTestCase):

    def test_predict(self):
        seen = {}

        def handler(request):
            seen['method'] = request.method
            seen['url'] = str(request.url)
            seen['body'] = json.loads(request.content)
            return httpx.Response(200, json={'predictedGrade': 88, 'feedback': 'Great'})

        client = mock_client(handler)
        payload = {'grades': [], 'assignments': 5, 'attendance': 92}

        result = client.predict(payload)
        client.close()

        self.assertEqual(result, PredictionResult(predicted_grade=88.0, feedback='Great'))
        self.assertEqual(seen['method'], 'POST')
        self.assertEqual(seen['url'], PREDICT_URL)
        self.assertEqual(seen['body'], payload)

    def test_http_error_status(self):
        client = mock_client(lambda request: httpx.Response(500, text='boom'))
        with self.assertRaisesMessage(UpstreamError, 'HTTP 500'):
            client.predict({'grades': []})

    def test_unreachable(self):
        def handler(request):
            raise httpx.ConnectError('connection refused', request=request)

        client = mock_client(handler)
        with self.assertRaisesMessage(UpstreamError, 'unreachable'):
            client.predict({'grades': []})

    def test_non_json_body(self):
        client = mock_client(lambda request: httpx.Response(200, text='<html>'))
        with self.assertRaisesMessage(UpstreamError, 'invalid JSON'):
            client.predict({'grades': []})

    @override_settings(PREDICTION_SERVICE={
        'CLIENT': 'predictions.client.HttpPredictionClient',
        'URL': PREDICT_URL,
        'TIMEOUT': 2.5,
    })
    def test_build_from_settings(self):
        client = build_prediction_client()
        self.assertIsInstance(client, HttpPredictionClient)
        self.assertEqual(client.url, PREDICT_URL)
        client.close()


class ParsePredictionResponseTest(SimpleTestCase):

    def test_valid(self):
        self.assertEqual(
            parse_prediction_response({'predictedGrade': 71.5, 'feedback': 'ok'}),
            PredictionResult(71.5, 'ok')
        )

    def test_malformed(self):
        cases = [
            [],
            {},
            {'predictedGrade': 80},
            {'feedback': 'ok'},
            {'predictedGrade': '80', 'feedback': 'ok'},
            {'predictedGrade': True, 'feedback': 'ok'},
            {'predictedGrade': float('nan'), 'feedback': 'ok'},
            {'predictedGrade': 80, 'feedback': None},
        ]
        for data in cases:
            with self.subTest(data=data):
                with self.assertRaises(UpstreamError):
                    parse_prediction_response(data)


class BuildPredictionPayloadTest(TestCase):

    def test_payload(self):
        user = User.objects.create_user('p@example.com', password='pw')
        student = Student.objects.create(user=user, name='S1')
        grade = Grade.objects.create(
            student=student,
            value=85,
            date=datetime(2024, 1, 1, tzinfo=dt_timezone.utc),
        )

        payload = build_prediction_payload(student)

        self.assertEqual(payload, {
            'grades': [{
                'id': str(grade.id),
                'value': 85.0,
                'date': '2024-01-01T00:00:00+00:00',
                'studentId': str(student.id),
            }],
            'assignments': 5,
            'attendance': 92,
        })


class CreatePredictionTest(GraphQLTestCase):

    def setUp(self):
        super().setUp()
        self.token, self.user = self.register(email='a@x.com', name='Ann', password='pw1')
        self.student = self.create_student(self.token, name='S1')

    def test_create_prediction(self):
        self.query(
            ADD_GRADE_MUTATION,
            {'studentId': self.student['id'], 'value': 85, 'date': '2024-01-01'},
            token=self.token,
        )

        response, body = self.query(CREATE_PREDICTION_MUTATION, {'studentId': self.student['id']}, token=self.token)

        self.assertEqual(response.status_code, 200)
        prediction = body['data']['createPrediction']
        self.assertEqual(prediction['predictedGrade'], 87.5)
        self.assertEqual(prediction['feedback'], 'Keep it up')
        self.assertTrue(prediction['createdAt'])

        [payload] = self.prediction_client.payloads
        self.assertEqual([g['value'] for g in payload['grades']], [85.0])
        self.assertEqual(payload['assignments'], 5)
        self.assertEqual(payload['attendance'], 92)

        stored = Prediction.objects.get(id=prediction['id'])
        self.assertEqual(str(stored.student_id), self.student['id'])

    def test_other_owner_is_forbidden(self):
        other_token, _ = self.register(email='bob@example.com')

        response, body = self.query(CREATE_PREDICTION_MUTATION, {'studentId': self.student['id']}, token=other_token)

        self.assertGraphQLError(body, 'Not authorized')
        self.assertEqual(response.status_code, 403)
        self.assertEqual(self.prediction_client.payloads, [])
        self.assertFalse(Prediction.objects.exists())

    def test_requires_token(self):
        response, body = self.query(CREATE_PREDICTION_MUTATION, {'studentId': self.student['id']})

        self.assertGraphQLError(body, 'Not authenticated')
        self.assertEqual(response.status_code, 401)

    def test_unknown_student(self):
        _, body = self.query(CREATE_PREDICTION_MUTATION, {'studentId': '9999'}, token=self.token)
        self.assertGraphQLError(body, 'Student 9999 not found')

    def test_upstream_failure_stores_nothing(self):
        self.prediction_client.error = UpstreamError('Prediction service unreachable: refused')

        response, body = self.query(CREATE_PREDICTION_MUTATION, {'studentId': self.student['id']}, token=self.token)

        self.assertGraphQLError(body, 'Prediction service unreachable')
        self.assertEqual(response.status_code, 502)
        self.assertFalse(Prediction.objects.exists())

    def test_end_to_end_with_http_client(self):
        def handler(request):
            body = json.loads(request.content)
            return httpx.Response(200, json={
                'predictedGrade': 60 + len(body['grades']),
                'feedback': 'From upstream',
            })

        self.use_prediction_client(mock_client(handler))
        _, body = self.query(CREATE_PREDICTION_MUTATION, {'studentId': self.student['id']}, token=self.token)

        self.assertEqual(body['data']['createPrediction']['predictedGrade'], 60.0)
        self.assertEqual(body['data']['createPrediction']['feedback'], 'From upstream')


class ScenarioTest(GraphQLTestCase):
    """register -> login -> createStudent -> addGrade -> createPrediction"""

    def test_scenario(self):
        self.use_prediction_client(FakePredictionClient(PredictionResult(91.0, 'On track')))

        t1, user = self.register(email='a@x.com', name='Ann', password='pw1')

        _, body = self.query(
            'mutation { login(email: "a@x.com", password: "pw1") { token user { id } } }'
        )
        t2 = body['data']['login']['token']
        self.assertEqual(body['data']['login']['user']['id'], user['id'])

        for token in (t1, t2):
            _, body = self.query('query { me { id } }', token=token)
            self.assertEqual(body['data']['me']['id'], user['id'])

        student = self.create_student(t1, name='S1')

        _, body = self.query(
            ADD_GRADE_MUTATION,
            {'studentId': student['id'], 'value': 85, 'date': '2024-01-01'},
            token=t1,
        )
        self.assertEqual(body['data']['addGrade']['value'], 85.0)

        _, body = self.query(CREATE_PREDICTION_MUTATION, {'studentId': student['id']}, token=t1)
        self.assertEqual(body['data']['createPrediction']['predictedGrade'], 91.0)
        self.assertEqual(body['data']['createPrediction']['feedback'], 'On track')

        _, body = self.query('query { students { predictions { feedback } grades { value } } }')
        [result] = body['data']['students']
        self.assertEqual(result['predictions'], [{'feedback': 'On track'}])
        self.assertEqual(result['grades'], [{'value': 85.0}])
