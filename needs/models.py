from django.db import models


class Need(models.Model):
    """A request for help posted by a user."""

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    owner = models.ForeignKey(
        "users.User", on_delete=models.CASCADE, related_name="needs"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.title


class SavedNeed(models.Model):
    """A need bookmarked by a user.

    No uniqueness constraint on ``(user, need)``: saving the same need
    twice stores two rows.
    """

    user = models.ForeignKey(
        "users.User", on_delete=models.CASCADE, related_name="saved_needs"
    )
    need = models.ForeignKey(Need, on_delete=models.CASCADE, related_name="saved_by")
    saved_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.user.email} - {self.need.title}"
