from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import Car
from .photos import delete_photo_on_commit


@receiver(post_delete, sender=Car)
def remove_car_photo(sender, instance, **kwargs):
    # Also fires for cars removed by a client cascade.
    if instance.photo:
        delete_photo_on_commit(instance.photo.name, instance.photo.storage)
