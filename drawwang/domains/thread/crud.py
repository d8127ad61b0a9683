# drawwang/domains/thread/crud.py

from drawwang.core.crud_base import CRUDBase
from . import models, schemas


class CRUDThread(CRUDBase[models.Thread, schemas.ThreadCreate]):
    def __init__(self):
        super().__init__(model=models.Thread)


thread = CRUDThread()
