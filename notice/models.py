from django.db import models
from django.utils import timezone

# Offered by the form; the model stores any category text.
SUGGESTED_CATEGORIES = ['General', 'Urgent', 'Events', 'Maintenance']


class Notice(models.Model):
    title = models.TextField()
    category = models.TextField()
    date = models.TextField()
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.title

    def to_dict(self):
        return {
            'id': self.pk,
            'title': self.title,
            'category': self.category,
            'date': self.date,
            'createdAt': self.created_at,
        }
