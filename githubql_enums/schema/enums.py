"""GitHub GraphQL API enumeration types.

Generated from the GitHub GraphQL schema. Member declarations are
``SYMBOLIC_NAME = "WIRE_VALUE", "description"``; wire values must match the
schema exactly and change only when the table is regenerated.
"""

from enum import unique

from githubql_enums.schema.base import GitHubEnum


@unique
class CommentAuthorAssociation(GitHubEnum):
    """A comment author association with repository."""

    MEMBER = "MEMBER", "Author is a member of the organization that owns the repository."
    OWNER = "OWNER", "Author is the owner of the repository."
    COLLABORATOR = "COLLABORATOR", "Author has been invited to collaborate on the repository."
    CONTRIBUTOR = "CONTRIBUTOR", "Author has previously committed to the repository."
    FIRST_TIME_CONTRIBUTOR = "FIRST_TIME_CONTRIBUTOR", "Author has not previously committed to the repository."
    FIRST_TIMER = "FIRST_TIMER", "Author has not previously committed to GitHub."
    NONE = "NONE", "Author has no association with the repository."


@unique
class CommentCannotUpdateReason(GitHubEnum):
    """The possible errors that will prevent a user from updating a comment."""

    INSUFFICIENT_ACCESS = "INSUFFICIENT_ACCESS", "You must be the author or have write access to this repository to update this comment."
    LOCKED = "LOCKED", "Unable to create comment because issue is locked."
    LOGIN_REQUIRED = "LOGIN_REQUIRED", "You must be logged in to update this comment."
    MAINTENANCE = "MAINTENANCE", "Repository is under maintenance."
    VERIFIED_EMAIL_REQUIRED = "VERIFIED_EMAIL_REQUIRED", "At least one email address must be verified to update this comment."


@unique
class DefaultRepositoryPermissionField(GitHubEnum):
    """The possible default permissions for organization-owned repositories."""

    READ = "READ", "Members have read access to org repos by default."
    WRITE = "WRITE", "Members have read and write access to org repos by default."
    ADMIN = "ADMIN", "Members have read, write, and admin access to org repos by default."


@unique
class DeploymentState(GitHubEnum):
    """The possible states in which a deployment can be."""

    ABANDONED = "ABANDONED", "The pending deployment was not updated after 30 minutes."
    ACTIVE = "ACTIVE", "The deployment is currently active."
    DESTROYED = "DESTROYED", "An inactive transient deployment."
    ERROR = "ERROR", "The deployment experienced an error."
    FAILURE = "FAILURE", "The deployment has failed."
    INACTIVE = "INACTIVE", "The deployment is inactive."
    PENDING = "PENDING", "The deployment is pending."


@unique
class DeploymentStatusState(GitHubEnum):
    """The possible states for a deployment status."""

    PENDING = "PENDING", "The deployment is pending."
    SUCCESS = "SUCCESS", "The deployment was successful."
    FAILURE = "FAILURE", "The deployment has failed."
    INACTIVE = "INACTIVE", "The deployment is inactive."
    ERROR = "ERROR", "The deployment experienced an error."


@unique
class GistOrderField(GitHubEnum):
    """Properties by which gist connections can be ordered."""

    CREATED_AT = "CREATED_AT", "Order gists by creation time."
    UPDATED_AT = "UPDATED_AT", "Order gists by update time."
    PUSHED_AT = "PUSHED_AT", "Order gists by push time."


@unique
class GistPrivacy(GitHubEnum):
    """The privacy of a Gist."""

    PUBLIC = "PUBLIC", "Public."
    SECRET = "SECRET", "Secret."
    ALL = "ALL", "Gists that are public and secret."


@unique
class GitSignatureState(GitHubEnum):
    """The state of a Git signature."""

    VALID = "VALID", "Valid signature and verified by GitHub."
    INVALID = "INVALID", "Invalid signature."
    MALFORMED_SIG = "MALFORMED_SIG", "Malformed signature."
    UNKNOWN_KEY = "UNKNOWN_KEY", "Key used for signing not known to GitHub."
    BAD_EMAIL = "BAD_EMAIL", "Invalid email used for signing."
    UNVERIFIED_EMAIL = "UNVERIFIED_EMAIL", "Email used for signing unverified on GitHub."
    NO_USER = "NO_USER", "Email used for signing not known to GitHub."
    UNKNOWN_SIG_TYPE = "UNKNOWN_SIG_TYPE", "Unknown signature type."
    UNSIGNED = "UNSIGNED", "Unsigned."
    GPGVERIFY_UNAVAILABLE = "GPGVERIFY_UNAVAILABLE", "Internal error - the GPG verification service is unavailable at the moment."
    GPGVERIFY_ERROR = "GPGVERIFY_ERROR", "Internal error - the GPG verification service misbehaved."
    NOT_SIGNING_KEY = "NOT_SIGNING_KEY", "The usage flags for the key that signed this don't allow signing."
    EXPIRED_KEY = "EXPIRED_KEY", "Signing key expired."


@unique
class IssueOrderField(GitHubEnum):
    """Properties by which issue connections can be ordered."""

    CREATED_AT = "CREATED_AT", "Order issues by creation time."
    UPDATED_AT = "UPDATED_AT", "Order issues by update time."
    COMMENTS = "COMMENTS", "Order issues by comment count."


@unique
class IssuePubSubTopic(GitHubEnum):
    """The possible PubSub channels for an issue."""

    UPDATED = "UPDATED", "The channel ID for observing issue updates."
    MARKASREAD = "MARKASREAD", "The channel ID for marking an issue as read."


@unique
class IssueState(GitHubEnum):
    """The possible states of an issue."""

    OPEN = "OPEN", "An issue that is still open."
    CLOSED = "CLOSED", "An issue that has been closed."


@unique
class LanguageOrderField(GitHubEnum):
    """Properties by which language connections can be ordered."""

    SIZE = "SIZE", "Order languages by the size of all files containing the language."


@unique
class MergeableState(GitHubEnum):
    """Whether or not a PullRequest can be merged."""

    MERGEABLE = "MERGEABLE", "The pull request can be merged."
    CONFLICTING = "CONFLICTING", "The pull request cannot be merged due to merge conflicts."
    UNKNOWN = "UNKNOWN", "The mergeability of the pull request is still being calculated."


@unique
class MilestoneState(GitHubEnum):
    """The possible states of a milestone."""

    OPEN = "OPEN", "A milestone that is still open."
    CLOSED = "CLOSED", "A milestone that has been closed."


@unique
class OrderDirection(GitHubEnum):
    """Possible directions in which to order a list of items when provided an `orderBy` argument."""

    ASC = "ASC", "Specifies an ascending order for a given `orderBy` argument."
    DESC = "DESC", "Specifies a descending order for a given `orderBy` argument."


@unique
class OrganizationInvitationRole(GitHubEnum):
    """The possible organization invitation roles."""

    DIRECT_MEMBER = "DIRECT_MEMBER", "The user is invited to be a direct member of the organization."
    ADMIN = "ADMIN", "The user is invited to be an admin of the organization."
    BILLING_MANAGER = "BILLING_MANAGER", "The user is invited to be a billing manager of the organization."
    REINSTATE = "REINSTATE", "The user's previous role will be reinstated."


@unique
class ProjectCardState(GitHubEnum):
    """Various content states of a ProjectCard."""

    CONTENT_ONLY = "CONTENT_ONLY", "The card has content only."
    NOTE_ONLY = "NOTE_ONLY", "The card has a note only."
    REDACTED = "REDACTED", "The card is redacted."


@unique
class ProjectOrderField(GitHubEnum):
    """Properties by which project connections can be ordered."""

    CREATED_AT = "CREATED_AT", "Order projects by creation time."
    UPDATED_AT = "UPDATED_AT", "Order projects by update time."
    NAME = "NAME", "Order projects by name."


@unique
class ProjectState(GitHubEnum):
    """State of the project; either 'open' or 'closed'."""

    OPEN = "OPEN", "The project is open."
    CLOSED = "CLOSED", "The project is closed."


@unique
class PullRequestPubSubTopic(GitHubEnum):
    """The possible PubSub channels for a pull request."""

    UPDATED = "UPDATED", "The channel ID for observing pull request updates."
    MARKASREAD = "MARKASREAD", "The channel ID for marking an pull request as read."
    HEAD_REF = "HEAD_REF", "The channel ID for observing head ref updates."


@unique
class PullRequestReviewEvent(GitHubEnum):
    """The possible events to perform on a pull request review."""

    COMMENT = "COMMENT", "Submit general feedback without explicit approval."
    APPROVE = "APPROVE", "Submit feedback and approve merging these changes."
    REQUEST_CHANGES = "REQUEST_CHANGES", "Submit feedback that must be addressed before merging."
    DISMISS = "DISMISS", "Dismiss review so it now longer effects merging."


@unique
class PullRequestReviewState(GitHubEnum):
    """The possible states of a pull request review."""

    PENDING = "PENDING", "A review that has not yet been submitted."
    COMMENTED = "COMMENTED", "An informational review."
    APPROVED = "APPROVED", "A review allowing the pull request to merge."
    CHANGES_REQUESTED = "CHANGES_REQUESTED", "A review blocking the pull request from merging."
    DISMISSED = "DISMISSED", "A review that has been dismissed."


@unique
class PullRequestState(GitHubEnum):
    """The possible states of a pull request."""

    OPEN = "OPEN", "A pull request that is still open."
    CLOSED = "CLOSED", "A pull request that has been closed without being merged."
    MERGED = "MERGED", "A pull request that has been closed by being merged."


@unique
class ReactionContent(GitHubEnum):
    """Emojis that can be attached to Issues, Pull Requests and Comments."""

    THUMBS_UP = "THUMBS_UP", "Represents the 👍 emoji."
    THUMBS_DOWN = "THUMBS_DOWN", "Represents the 👎 emoji."
    LAUGH = "LAUGH", "Represents the 😄 emoji."
    HOORAY = "HOORAY", "Represents the 🎉 emoji."
    CONFUSED = "CONFUSED", "Represents the 😕 emoji."
    HEART = "HEART", "Represents the ❤️ emoji."


@unique
class ReactionOrderField(GitHubEnum):
    """A list of fields that reactions can be ordered by."""

    CREATED_AT = "CREATED_AT", "Allows ordering a list of reactions by when they were created."


@unique
class RepositoryAffiliation(GitHubEnum):
    """The affiliation of a user to a repository."""

    OWNER = "OWNER", "Repositories that are owned by the authenticated user."
    COLLABORATOR = "COLLABORATOR", "Repositories that the user has been added to as a collaborator."
    ORGANIZATION_MEMBER = "ORGANIZATION_MEMBER", "Repositories that the user has access to through being a member of an organization. This includes every repository on every team that the user is on."


@unique
class RepositoryCollaboratorAffiliation(GitHubEnum):
    """The affiliation type between collaborator and repository."""

    ALL = "ALL", "All collaborators of the repository."
    OUTSIDE = "OUTSIDE", "All outside collaborators of an organization-owned repository."


@unique
class RepositoryLockReason(GitHubEnum):
    """The possible reasons a given repository could be in a locked state."""

    MOVING = "MOVING", "The repository is locked due to a move."
    BILLING = "BILLING", "The repository is locked due to a billing related reason."
    RENAME = "RENAME", "The repository is locked due to a rename."
    MIGRATING = "MIGRATING", "The repository is locked due to a migration."


@unique
class RepositoryOrderField(GitHubEnum):
    """Properties by which repository connections can be ordered."""

    CREATED_AT = "CREATED_AT", "Order repositories by creation time."
    UPDATED_AT = "UPDATED_AT", "Order repositories by update time."
    PUSHED_AT = "PUSHED_AT", "Order repositories by push time."
    NAME = "NAME", "Order repositories by name."
    STARGAZERS = "STARGAZERS", "Order repositories by number of stargazers."


@unique
class RepositoryPermission(GitHubEnum):
    """The access level to a repository."""

    ADMIN = "ADMIN", "Can read, clone, push, and add collaborators."
    WRITE = "WRITE", "Can read, clone and push."
    READ = "READ", "Can read and clone."


@unique
class RepositoryPrivacy(GitHubEnum):
    """The privacy of a repository."""

    PUBLIC = "PUBLIC", "Public."
    PRIVATE = "PRIVATE", "Private."


@unique
class SearchType(GitHubEnum):
    """Represents the individual results of a search."""

    ISSUE = "ISSUE", "Returns results matching issues in repositories."
    REPOSITORY = "REPOSITORY", "Returns results matching repositories."
    USER = "USER", "Returns results matching users on GitHub."


@unique
class StarOrderField(GitHubEnum):
    """Properties by which star connections can be ordered."""

    STARRED_AT = "STARRED_AT", "Allows ordering a list of stars by when they were created."


@unique
class StatusState(GitHubEnum):
    """The possible commit status states."""

    EXPECTED = "EXPECTED", "Status is expected."
    ERROR = "ERROR", "Status is errored."
    FAILURE = "FAILURE", "Status is failing."
    PENDING = "PENDING", "Status is pending."
    SUCCESS = "SUCCESS", "Status is successful."


@unique
class SubscriptionState(GitHubEnum):
    """The possible states of a subscription."""

    UNSUBSCRIBED = "UNSUBSCRIBED", "The User is only notified when particpating or @mentioned."
    SUBSCRIBED = "SUBSCRIBED", "The User is notified of all conversations."
    IGNORED = "IGNORED", "The User is never notified."


@unique
class TeamMemberRole(GitHubEnum):
    """The possible team member roles; either 'maintainer' or 'member'."""

    MAINTAINER = "MAINTAINER", "A team maintainer has permission to add and remove team members."
    MEMBER = "MEMBER", "A team member has no administrative permissions on the team."


@unique
class TeamMembershipType(GitHubEnum):
    """Defines which types of team members are included in the returned list. Can be one of IMMEDIATE, CHILD_TEAM or ALL."""

    IMMEDIATE = "IMMEDIATE", "Includes only immediate members of the team."
    CHILD_TEAM = "CHILD_TEAM", "Includes only child team members for the team."
    ALL = "ALL", "Includes immediate and child team members for the team."


@unique
class TeamOrderField(GitHubEnum):
    """Properties by which team connections can be ordered."""

    NAME = "NAME", "Allows ordering a list of teams by name."


@unique
class TeamPrivacy(GitHubEnum):
    """The possible team privacy values."""

    SECRET = "SECRET", "A secret team can only be seen by its members."
    VISIBLE = "VISIBLE", "A visible team can be seen and @mentioned by every member of the organization."


@unique
class TeamRepositoryOrderField(GitHubEnum):
    """Properties by which team repository connections can be ordered."""

    CREATED_AT = "CREATED_AT", "Order repositories by creation time."
    UPDATED_AT = "UPDATED_AT", "Order repositories by update time."
    PUSHED_AT = "PUSHED_AT", "Order repositories by push time."
    NAME = "NAME", "Order repositories by name."
    PERMISSION = "PERMISSION", "Order repositories by permission."
    STARGAZERS = "STARGAZERS", "Order repositories by number of stargazers."


@unique
class TeamRole(GitHubEnum):
    """The role of a user on a team."""

    ADMIN = "ADMIN", "User has admin rights on the team."
    MEMBER = "MEMBER", "User is a member of the team."


@unique
class TopicSuggestionDeclineReason(GitHubEnum):
    """Reason that the suggested topic is declined."""

    NOT_RELEVANT = "NOT_RELEVANT", "The suggested topic is not relevant to the repository."
    TOO_SPECIFIC = "TOO_SPECIFIC", "The suggested topic is too specific for the repository (e.g. #ruby-on-rails-version-4-2-1)."
    PERSONAL_PREFERENCE = "PERSONAL_PREFERENCE", "The viewer does not like the suggested topic."
    TOO_GENERAL = "TOO_GENERAL", "The suggested topic is too general for the repository."


ALL_ENUM_TYPES: tuple[type[GitHubEnum], ...] = (
    CommentAuthorAssociation,
    CommentCannotUpdateReason,
    DefaultRepositoryPermissionField,
    DeploymentState,
    DeploymentStatusState,
    GistOrderField,
    GistPrivacy,
    GitSignatureState,
    IssueOrderField,
    IssuePubSubTopic,
    IssueState,
    LanguageOrderField,
    MergeableState,
    MilestoneState,
    OrderDirection,
    OrganizationInvitationRole,
    ProjectCardState,
    ProjectOrderField,
    ProjectState,
    PullRequestPubSubTopic,
    PullRequestReviewEvent,
    PullRequestReviewState,
    PullRequestState,
    ReactionContent,
    ReactionOrderField,
    RepositoryAffiliation,
    RepositoryCollaboratorAffiliation,
    RepositoryLockReason,
    RepositoryOrderField,
    RepositoryPermission,
    RepositoryPrivacy,
    SearchType,
    StarOrderField,
    StatusState,
    SubscriptionState,
    TeamMemberRole,
    TeamMembershipType,
    TeamOrderField,
    TeamPrivacy,
    TeamRepositoryOrderField,
    TeamRole,
    TopicSuggestionDeclineReason,
)
"""Every enumeration type of the schema, in alphabetical order."""

__all__ = ["ALL_ENUM_TYPES"] + [enum_type.__name__ for enum_type in ALL_ENUM_TYPES]
