from django.http import Http404


class NotFound(Http404):
    """
    No record with the requested key. Subclasses Http404 so an unhandled one
    becomes a plain 404 page.
    """
    def __init__(self, model, pk):
        self.model = model
        self.pk = pk
        super().__init__(f"{model._meta.verbose_name} #{pk} not found.")


class ValidationFailed(Exception):
    """
    Input rejected by the entity's form. The bound form is kept so views can
    re-render it with field errors.
    """
    def __init__(self, form):
        self.form = form
        super().__init__("Validation failed: " + ", ".join(sorted(form.errors)))

    @property
    def errors(self):
        return self.form.errors


class ConcurrencyConflict(Exception):
    def __init__(self, model, pk, expected, actual):
        self.model = model
        self.pk = pk
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{model._meta.verbose_name} #{pk} was changed by someone else "
            f"(version {expected} submitted, {actual} stored)."
        )


class DeleteRestricted(Exception):
    def __init__(self, obj, protected):
        self.obj = obj
        self.protected = list(protected)
        super().__init__(
            f"{obj} cannot be deleted: still referenced by {len(self.protected)} record(s)."
        )


class StorageFailure(Exception):
    pass
