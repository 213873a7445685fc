import strawberry

from .queries import Query as CoreQuery
from .mutations import Mutation as CoreMutation
from students.graphql.queries import StudentQuery
from students.graphql.mutations import StudentMutation
from assignment.graphql.mutations import AssignmentMutation
from grades.graphql.mutations import GradesMutation
from predictions.graphql.mutations import PredictionMutation

# ==================================================
# MERGED SCHEMA
# ==================================================

# Merge queries from core and students apps
@strawberry.type
class Query(CoreQuery, StudentQuery):
    pass


# Merge mutations from every app
@strawberry.type
class Mutation(CoreMutation, StudentMutation, AssignmentMutation, GradesMutation, PredictionMutation):
    pass


# Create unified schema
schema = strawberry.Schema(query=Query, mutation=Mutation)
