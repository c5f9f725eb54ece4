from .auth import AuthUser, LoginRequest, Session
from .certificate import Certificate, CertificateInput
from .dashboard import CategoryCount, DashboardSummary
from .experience import Experience, ExperienceInput
from .image import ImageAsset, ImageConfig, ImageKind, RejectedFile, ScalePriority, UploadResult
from .link import LINK_TYPES, ProjectLink
from .message import Message, MessageInput, MessageList, MessageReadUpdate
from .profile import Education, ProfileSettings, ProfileSettingsInput, SocialLinks
from .project import BulkDeleteRequest, BulkDeleteResult, Project, ProjectInput
from .skill import Skill, SkillInput

__all__ = [
    "AuthUser",
    "LoginRequest",
    "Session",
    "Certificate",
    "CertificateInput",
    "CategoryCount",
    "DashboardSummary",
    "Experience",
    "ExperienceInput",
    "ImageAsset",
    "ImageConfig",
    "ImageKind",
    "RejectedFile",
    "ScalePriority",
    "UploadResult",
    "LINK_TYPES",
    "ProjectLink",
    "Message",
    "MessageInput",
    "MessageList",
    "MessageReadUpdate",
    "Education",
    "ProfileSettings",
    "ProfileSettingsInput",
    "SocialLinks",
    "BulkDeleteRequest",
    "BulkDeleteResult",
    "Project",
    "ProjectInput",
    "Skill",
    "SkillInput",
]
