"""仓库接口定义模块

定义数据访问层的抽象接口，支持依赖注入和单元测试。
"""

from abc import ABC, abstractmethod

from todosaas.schemas.todo import Todo


class ITodoRepository(ABC):
    """Todo 仓库接口"""

    @abstractmethod
    def insert(self, text: str) -> Todo:
        """插入已校验的 todo，分配新ID并返回创建的记录"""
        pass

    @abstractmethod
    def list_todos(self) -> list[Todo]:
        """按插入顺序返回所有 todo 的快照"""
        pass

    @abstractmethod
    def delete(self, todo_id: int) -> bool:
        """删除 todo，返回是否找到并删除"""
        pass

    @abstractmethod
    def count(self) -> int:
        """统计 todo 数量"""
        pass

    @property
    @abstractmethod
    def next_id(self) -> int:
        """下一个将被分配的ID"""
        pass
