# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from portfolio.application.services.analytics import AnalyticsService
from portfolio.application.services.assistant import AssistantService
from portfolio.application.services.blog import BlogService
from portfolio.application.services.contact import ContactService
from portfolio.application.services.credentials import CredentialStore
from portfolio.application.services.password_hashing import WerkzeugPasswordHasher
from portfolio.application.services.projects import ProjectService
from portfolio.application.services.skills import SkillService
from portfolio.application.use_cases.users import (
    LoginUserUseCase,
    RegisterUserUseCase,
    ResolveIdentityUseCase,
)
from portfolio.infrastructure.auth.gate import RequestGate
from portfolio.infrastructure.auth.token_codec import JwtTokenCodec
from portfolio.infrastructure.db import SessionLocal
from portfolio.infrastructure.gemini import GeminiAssistant
from portfolio.infrastructure.repositories.content import (
    SqlAlchemyBlogPostRepository,
    SqlAlchemyContactMessageRepository,
    SqlAlchemyProjectRepository,
    SqlAlchemyProjectViewRepository,
    SqlAlchemySkillCategoryRepository,
)
from portfolio.infrastructure.repositories.users import SqlAlchemyUserRepository
from portfolio.interfaces.http.controllers.ai_controller import AIController
from portfolio.interfaces.http.controllers.analytics_controller import AnalyticsController
from portfolio.interfaces.http.controllers.auth_controller import AuthController
from portfolio.interfaces.http.controllers.blog_controller import BlogController
from portfolio.interfaces.http.controllers.contact_controller import ContactController
from portfolio.interfaces.http.controllers.misc_controller import MiscController
from portfolio.interfaces.http.controllers.projects_controller import ProjectsController
from portfolio.interfaces.http.controllers.skills_controller import SkillsController
from portfolio.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @property
    def config(self) -> AppConfig:
        return self._config

    # Credentials and tokens

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(SessionLocal)

    @cached_property
    def credential_store(self) -> CredentialStore:
        return CredentialStore(users=self.user_repository, password_hasher=self.password_hasher)

    @cached_property
    def token_codec(self) -> JwtTokenCodec:
        return JwtTokenCodec(
            self._config.jwt_secret,
            ttl=timedelta(days=self._config.token_ttl_days),
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(credentials=self.credential_store, tokens=self.token_codec)

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(credentials=self.credential_store, tokens=self.token_codec)

    @cached_property
    def resolve_identity_use_case(self) -> ResolveIdentityUseCase:
        return ResolveIdentityUseCase(credentials=self.credential_store, tokens=self.token_codec)

    @cached_property
    def request_gate(self) -> RequestGate:
        return RequestGate(self.resolve_identity_use_case)

    # Content repositories

    @cached_property
    def project_repository(self) -> SqlAlchemyProjectRepository:
        return SqlAlchemyProjectRepository(SessionLocal)

    @cached_property
    def blog_post_repository(self) -> SqlAlchemyBlogPostRepository:
        return SqlAlchemyBlogPostRepository(SessionLocal)

    @cached_property
    def skill_category_repository(self) -> SqlAlchemySkillCategoryRepository:
        return SqlAlchemySkillCategoryRepository(SessionLocal)

    @cached_property
    def contact_message_repository(self) -> SqlAlchemyContactMessageRepository:
        return SqlAlchemyContactMessageRepository(SessionLocal)

    @cached_property
    def project_view_repository(self) -> SqlAlchemyProjectViewRepository:
        return SqlAlchemyProjectViewRepository(SessionLocal)

    # Services

    @cached_property
    def project_service(self) -> ProjectService:
        return ProjectService(projects=self.project_repository, views=self.project_view_repository)

    @cached_property
    def blog_service(self) -> BlogService:
        return BlogService(posts=self.blog_post_repository)

    @cached_property
    def skill_service(self) -> SkillService:
        return SkillService(categories=self.skill_category_repository)

    @cached_property
    def contact_service(self) -> ContactService:
        return ContactService(messages=self.contact_message_repository)

    @cached_property
    def analytics_service(self) -> AnalyticsService:
        return AnalyticsService(
            projects=self.project_repository,
            posts=self.blog_post_repository,
            views=self.project_view_repository,
            credentials=self.credential_store,
        )

    @cached_property
    def assistant_port(self) -> GeminiAssistant:
        ai = self._config.ai
        return GeminiAssistant(
            api_key=ai.gemini_api_key,
            model=ai.gemini_model,
            base_url=ai.gemini_base_url,
            timeout=ai.timeout,
        )

    @cached_property
    def assistant_service(self) -> AssistantService:
        return AssistantService(port=self.assistant_port, owner_name=self._config.ai.owner_name)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def projects_controller(self) -> ProjectsController:
        return ProjectsController(service=self.project_service)

    @cached_property
    def blog_controller(self) -> BlogController:
        return BlogController(service=self.blog_service)

    @cached_property
    def skills_controller(self) -> SkillsController:
        return SkillsController(service=self.skill_service)

    @cached_property
    def contact_controller(self) -> ContactController:
        return ContactController(service=self.contact_service)

    @cached_property
    def analytics_controller(self) -> AnalyticsController:
        return AnalyticsController(service=self.analytics_service)

    @cached_property
    def ai_controller(self) -> AIController:
        return AIController(service=self.assistant_service)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container()
