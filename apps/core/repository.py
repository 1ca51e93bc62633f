from __future__ import annotations

import logging

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import ProtectedError, RestrictedError

from .exceptions import (
    ConcurrencyConflict,
    DeleteRestricted,
    NotFound,
    StorageFailure,
    ValidationFailed,
)

logger = logging.getLogger(__name__)


class Repository:
    """
    CRUD for one entity type, shared by every app.

    Subclasses set:
      model       -- the Django model
      form_class  -- ModelForm that owns field validation
      ordering    -- display order for list()
      related     -- select_related() paths joined into list()/get()
    """
    model = None
    form_class = None
    ordering: tuple[str, ...] = ()
    related: tuple[str, ...] = ()

    def queryset(self):
        qs = self.model.objects.all()
        if self.related:
            qs = qs.select_related(*self.related)
        if self.ordering:
            qs = qs.order_by(*self.ordering)
        return qs

    def list(self):
        return self.queryset()

    def get(self, pk):
        try:
            return self.queryset().get(pk=pk)
        except self.model.DoesNotExist:
            raise NotFound(self.model, pk)
        except (ValueError, TypeError):
            # non-numeric ids from the URL or a form
            raise NotFound(self.model, pk)

    def exists(self, pk) -> bool:
        return self.model.objects.filter(pk=pk).exists()

    def build_form(self, data=None, files=None, instance=None):
        return self.form_class(data, files, instance=instance)

    def create(self, data, files=None):
        form = self.build_form(data, files)
        if not form.is_valid():
            raise ValidationFailed(form)

        obj = self._save(form)
        logger.info("Created %s #%s", self._label, obj.pk)
        return obj

    def update(self, pk, data, files=None, version=None):
        try:
            with transaction.atomic():
                try:
                    current = self.model.objects.select_for_update().get(pk=pk)
                except self.model.DoesNotExist:
                    raise NotFound(self.model, pk)

                if version is not None and int(version) != current.version:
                    raise ConcurrencyConflict(self.model, pk, int(version), current.version)

                before = self.snapshot(current)
                form = self.build_form(data, files, instance=current)
                if not form.is_valid():
                    raise ValidationFailed(form)

                obj = form.save(commit=False)
                obj.version = current.version + 1
                obj = self._save(form, obj)
        except IntegrityError:
            raise
        except DatabaseError as exc:
            logger.exception("Storage failure updating %s #%s", self._label, pk)
            raise StorageFailure(str(exc)) from exc

        self.after_update(obj, before)
        logger.info("Updated %s #%s (version %s)", self._label, obj.pk, obj.version)
        return obj

    def delete(self, pk) -> bool:
        obj = self.model.objects.filter(pk=pk).first()
        if obj is None:
            return False

        try:
            obj.delete()
        except (ProtectedError, RestrictedError) as exc:
            protected = getattr(exc, "protected_objects", None) or getattr(exc, "restricted_objects", ())
            logger.warning("Delete of %s #%s blocked by references", self._label, pk)
            raise DeleteRestricted(obj, protected) from exc
        except IntegrityError:
            raise
        except DatabaseError as exc:
            logger.exception("Storage failure deleting %s #%s", self._label, pk)
            raise StorageFailure(str(exc)) from exc

        logger.info("Deleted %s #%s", self._label, pk)
        return True

    # Hooks

    def snapshot(self, obj):
        """State captured before an update, handed to after_update()."""
        return None

    def after_update(self, obj, before):
        pass

    # Internals

    @property
    def _label(self) -> str:
        return self.model._meta.verbose_name

    def _save(self, form, obj=None):
        try:
            if obj is None:
                return form.save()
            obj.save()
            form.save_m2m()
            return obj
        except IntegrityError:
            raise
        except DatabaseError as exc:
            logger.exception("Storage failure saving %s", self._label)
            raise StorageFailure(str(exc)) from exc
