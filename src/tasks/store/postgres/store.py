import logging
from datetime import datetime
from sqlalchemy import create_engine, delete, select, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from src.common.exceptions import ResourceNotFoundException, ResourceType
from src.tasks.schemas import Task
from src.tasks.store.base import TaskStore
from src.tasks.store.postgres.model import Base, TaskModel

logger = logging.getLogger(__name__)


class PostgresTaskStore(TaskStore):
    def __init__(self, database_url: str):
        self.engine = create_engine(database_url)
        self.Session = sessionmaker(bind=self.engine)
        logger.info(
            "Connecting task store to %s",
            make_url(database_url).render_as_string(hide_password=True),
        )
        Base.metadata.create_all(self.engine)

    def _map_task(self, task: TaskModel) -> Task:
        return Task(
            id=task.id,
            title=task.title,
            description=task.description,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    def list_tasks(self) -> list[Task]:
        with self.Session() as session:
            tasks = session.scalars(select(TaskModel).order_by(TaskModel.id)).all()
            return [self._map_task(task) for task in tasks]

    def create_task(self, title: str, description: str, timestamp: datetime) -> Task:
        wall_clock = timestamp.replace(tzinfo=None)
        with self.Session() as session:
            new_task = TaskModel(
                title=title,
                description=description,
                created_at=wall_clock,
                updated_at=wall_clock,
            )

            try:
                session.add(new_task)
                session.commit()
            except SQLAlchemyError:
                session.rollback()
                raise

            session.refresh(new_task)
            logger.debug("Created task %s", new_task.id)
            return self._map_task(new_task)

    def delete_task(self, task_id: int) -> None:
        with self.Session() as session:
            try:
                result = session.execute(
                    delete(TaskModel).where(TaskModel.id == task_id)
                )
                session.commit()
            except SQLAlchemyError:
                session.rollback()
                raise

            if result.rowcount == 0:
                raise ResourceNotFoundException(ResourceType.TASK, str(task_id))

            logger.debug("Deleted task %s", task_id)

    def ping(self) -> None:
        with self.engine.connect() as connection:
            result = connection.execute(text("SELECT 1")).scalar()
            if result != 1:
                raise RuntimeError("Unexpected result from database")

    def close(self) -> None:
        self.engine.dispose()
