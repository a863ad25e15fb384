"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import AuthSettings, CommentSettings
from board.domain.repository import ArticleRepository, CommentRepository
from board.domain.service import CommentDeletionPolicy, CommentService, JWTService
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_deletion_policy(
        self, comment_repository: CommentRepository
    ) -> CommentDeletionPolicy:
        """Provide comment deletion policy."""
        return CommentDeletionPolicy(comment_repository=comment_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
        deletion_policy: CommentDeletionPolicy,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            article_repository=article_repository,
            deletion_policy=deletion_policy,
            comment_settings=comment_settings,
        )
