from backend.app.models.account import Account
from backend.app.models.action import Action
