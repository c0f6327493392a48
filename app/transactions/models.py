from django.db import models


# Upper bound of PositiveIntegerField on every supported backend
MAX_USER_ID = 2147483647


class Transaction(models.Model):
    SPENT = 'spent'
    RECEIVE = 'receive'
    TRANSACTION_TYPE = (
        (SPENT, 'Spent'),
        (RECEIVE, 'Receive'),
    )

    user_id = models.PositiveIntegerField(db_index=True)
    date = models.DateField()
    type = models.CharField(max_length=7, choices=TRANSACTION_TYPE)
    amount = models.DecimalField(max_digits=24, decimal_places=6)
    category = models.CharField(max_length=255)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"{self.type.capitalize()} - {self.amount} on {self.date}"
