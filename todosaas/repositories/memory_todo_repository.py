"""基于内存的 Todo 仓库实现

数据只存在于当前进程，重启即丢失；多副本部署时各副本数据互不同步。
"""

import threading

from todosaas.repositories.interfaces import ITodoRepository
from todosaas.schemas.todo import Todo
from todosaas.util.time_utils import utc_now


class InMemoryTodoRepository(ITodoRepository):
    """内存 Todo 仓库

    FastAPI 在线程池中执行同步接口，列表与计数器的读写都需要持锁。
    """

    def __init__(self):
        self._todos: list[Todo] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def insert(self, text: str) -> Todo:
        with self._lock:
            todo = Todo(id=self._next_id, text=text, created_at=utc_now())
            self._next_id += 1
            self._todos.append(todo)
            return todo

    def list_todos(self) -> list[Todo]:
        with self._lock:
            return [todo.model_copy() for todo in self._todos]

    def delete(self, todo_id: int) -> bool:
        with self._lock:
            for index, todo in enumerate(self._todos):
                if todo.id == todo_id:
                    del self._todos[index]
                    return True
            return False

    def count(self) -> int:
        with self._lock:
            return len(self._todos)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id
