# backend/app/db/models/__init__.py

from app.db.models.pet import Pet
from app.db.models.playtime import Playtime
from app.db.models.feeding import Feeding
from app.db.models.scolding import Scolding
