"""
hotel_core/domain/customer.py

Customer 领域实体

客户以邮箱作为唯一标识：相等性和哈希只看 email。
"""
import re
from dataclasses import dataclass

from hotel_core.exceptions import InvalidArgument, require

EMAIL_PATTERN = re.compile(r"^[^@]+@[^@]+\.[^@]+$")


@dataclass(frozen=True, eq=False)
class Customer:
    """
    客户（构造后不可变）

    Attributes:
        first_name: 名
        last_name: 姓
        email: 邮箱，唯一标识
    """
    first_name: str
    last_name: str
    email: str

    def __post_init__(self):
        require(self.first_name, "first_name")
        require(self.last_name, "last_name")
        require(self.email, "email")
        if not self.first_name or not self.last_name:
            raise InvalidArgument("客户姓名不能为空")
        if not EMAIL_PATTERN.fullmatch(self.email):
            raise InvalidArgument(f"邮箱格式不正确: '{self.email}'")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Customer):
            return NotImplemented
        return self.email == other.email

    def __hash__(self) -> int:
        return hash(self.email)

    def __str__(self) -> str:
        return f"{self.full_name} <{self.email}>"
