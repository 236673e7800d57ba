import logging

from libs.result import Error, Result, Return
from src.app.repositories.user_repository import DuplicateEmailError
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from .register_dto import RegisterCommand, RegisterResponse

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Check if email already exists
    2. Hash password (salted, one-way)
    3. Create User with blocked=False
    4. Commit transaction
    """

    def __init__(self, uow: UnitOfWork, hasher: IPasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated name, email, password

        Returns:
            Result[RegisterResponse] with the created user
            or Error(EMAIL_ALREADY_EXISTS) if email exists
        """
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            user = User(
                name=command.name,
                email=command.email,
                password_hash=self.hasher.hash(command.password),
            )

            # A concurrent registration can still win the unique index
            try:
                user = await self.uow.users.create(user)
            except DuplicateEmailError:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            await self.uow.commit()

            logger.info(f"User registered: {user.id}")

            return Return.ok(
                RegisterResponse(user_id=str(user.id))
            )
