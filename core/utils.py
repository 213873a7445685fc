"""
Helpers shared by the GraphQL resolvers of every app
"""
from core.exceptions import NotFound


def get_object_or_not_found(queryset_or_model, id, label=None):
    """
    Fetch a row by primary key, raising NotFound for unknown or malformed ids

    Args:
        queryset_or_model: model class or queryset to search
        id: GraphQL ID (string) or int
        label: name used in the error message (defaults to the model name)
    """
    manager = getattr(queryset_or_model, 'objects', queryset_or_model)
    model = getattr(manager, 'model', queryset_or_model)
    label = label or model._meta.verbose_name.title()

    try:
        pk = int(id)
    except (TypeError, ValueError):
        raise NotFound(f"{label} {id} not found")

    try:
        return manager.get(pk=pk)
    except model.DoesNotExist:
        raise NotFound(f"{label} {id} not found")
