from django.db import models


class VersionedModel(models.Model):
    # Bumped by Repository.update; edit forms send it back as a hidden input.
    version = models.PositiveIntegerField(default=1, editable=False)

    class Meta:
        abstract = True
