from abc import abstractmethod, ABC
from ..data.address import Address

class Rule(ABC):
    name:str

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def matches(self, address:Address) -> bool:
        pass

    def __repr__(self):
        return f"{self.name}()"
