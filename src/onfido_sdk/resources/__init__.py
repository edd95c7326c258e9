"""Resources – typed operations per API resource."""
from onfido_sdk.resources.applicants import (
    Address,
    Applicant,
    ApplicantPayload,
    Applicants,
    Consent,
    IdNumber,
    Location,
    WithIncludeDeleted,
)
from onfido_sdk.resources.base import CallOptions, Model, Resource
from onfido_sdk.resources.documents import (
    Document,
    DocumentSide,
    DocumentType,
    DocumentUpload,
    Documents,
)
from onfido_sdk.resources.workflow_runs import (
    EvidenceSummary,
    WithWorkflowRunCreatedAfter,
    WithWorkflowRunCreatedBefore,
    WithWorkflowRunSort,
    WithWorkflowRunStatus,
    WithWorkflowRunTags,
    WorkflowRun,
    WorkflowRunLink,
    WorkflowRunPayload,
    WorkflowRunStatus,
    WorkflowRuns,
)

__all__ = [
    "Address",
    "Applicant",
    "ApplicantPayload",
    "Applicants",
    "CallOptions",
    "Consent",
    "Document",
    "DocumentSide",
    "DocumentType",
    "DocumentUpload",
    "Documents",
    "EvidenceSummary",
    "IdNumber",
    "Location",
    "Model",
    "Resource",
    "WithIncludeDeleted",
    "WithWorkflowRunCreatedAfter",
    "WithWorkflowRunCreatedBefore",
    "WithWorkflowRunSort",
    "WithWorkflowRunStatus",
    "WithWorkflowRunTags",
    "WorkflowRun",
    "WorkflowRunLink",
    "WorkflowRunPayload",
    "WorkflowRunStatus",
    "WorkflowRuns",
]
