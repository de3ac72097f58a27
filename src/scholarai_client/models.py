from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """
    Standard backend wrapper: {status, message, data, timestamp}.
    `data` is only meaningful when the call succeeded.
    """

    status: int
    message: str = ""
    data: Optional[T] = None
    timestamp: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class InputModel(BaseModel):
    """Request payload base: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_body(self) -> Dict[str, Any]:
        # Unset optionals are left out of the JSON body entirely
        return self.model_dump(by_alias=True, exclude_none=True)


class ResourceModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# --- Input Models (request bodies) ---


class CreateDocumentInput(InputModel):
    project_id: str = Field(alias="projectId")
    title: str
    content: Optional[str] = None
    document_type: Optional[str] = Field(default=None, alias="documentType")


class UpdateDocumentInput(InputModel):
    document_id: str = Field(alias="documentId")
    title: Optional[str] = None
    content: Optional[str] = None


class CompileLatexInput(InputModel):
    latex_content: str = Field(alias="latexContent")


class GeneratePdfInput(InputModel):
    latex_content: str = Field(alias="latexContent")
    filename: Optional[str] = None


class AIChatInput(InputModel):
    user_request: str = Field(alias="userRequest")
    selected_text: Optional[str] = Field(default=None, alias="selectedText")
    full_document: Optional[str] = Field(default=None, alias="fullDocument")


class ContentInput(InputModel):
    content: str
    context: Optional[str] = None
    venue: Optional[str] = None


class ExtractionInput(InputModel):
    paper_id: str = Field(alias="paperId")
    extract_text: Optional[bool] = Field(default=None, alias="extractText")
    extract_figures: Optional[bool] = Field(default=None, alias="extractFigures")
    extract_tables: Optional[bool] = Field(default=None, alias="extractTables")
    extract_equations: Optional[bool] = Field(default=None, alias="extractEquations")
    extract_code: Optional[bool] = Field(default=None, alias="extractCode")
    extract_references: Optional[bool] = Field(
        default=None, alias="extractReferences"
    )
    use_ocr: Optional[bool] = Field(default=None, alias="useOcr")
    detect_entities: Optional[bool] = Field(default=None, alias="detectEntities")
    async_processing: Optional[bool] = Field(default=None, alias="asyncProcessing")


class CreateProjectInput(InputModel):
    user_id: str = Field(alias="userId")
    title: str
    description: Optional[str] = None
    research_domain: Optional[str] = Field(default=None, alias="researchDomain")
    status: Optional[str] = None


class ScholarBotInput(InputModel):
    message: str
    user_id: str = Field(alias="userId")


class LibraryInput(InputModel):
    user_id: str = Field(alias="userId")
    project_id: str = Field(alias="projectId")


class PaperAuthorInput(InputModel):
    name: str
    author_id: Optional[str] = Field(default=None, alias="authorId")
    orcid: Optional[str] = None
    affiliation: Optional[str] = None


class UploadedPaperInput(InputModel):
    project_id: str = Field(alias="projectId")
    title: str
    source: str
    pdf_content_url: str = Field(alias="pdfContentUrl")
    abstract_text: Optional[str] = Field(default=None, alias="abstractText")
    authors: Optional[List[PaperAuthorInput]] = None
    publication_date: Optional[str] = Field(default=None, alias="publicationDate")
    doi: Optional[str] = None
    semantic_scholar_id: Optional[str] = Field(default=None, alias="semanticScholarId")
    external_ids: Optional[Dict[str, Any]] = Field(default=None, alias="externalIds")
    pdf_url: Optional[str] = Field(default=None, alias="pdfUrl")
    is_open_access: Optional[bool] = Field(default=None, alias="isOpenAccess")
    paper_url: Optional[str] = Field(default=None, alias="paperUrl")
    venue_name: Optional[str] = Field(default=None, alias="venueName")
    publisher: Optional[str] = None
    publication_types: Optional[List[str]] = Field(
        default=None, alias="publicationTypes"
    )
    volume: Optional[str] = None
    issue: Optional[str] = None
    pages: Optional[str] = None
    citation_count: Optional[int] = Field(default=None, alias="citationCount")
    reference_count: Optional[int] = Field(default=None, alias="referenceCount")
    influential_citation_count: Optional[int] = Field(
        default=None, alias="influentialCitationCount"
    )
    fields_of_study: Optional[List[str]] = Field(default=None, alias="fieldsOfStudy")
    uploaded_at: Optional[str] = Field(default=None, alias="uploadedAt")
    file_size: Optional[int] = Field(default=None, alias="fileSize")
    file_name: Optional[str] = Field(default=None, alias="fileName")


# --- Response Models ---


class Document(ResourceModel):
    id: str
    project_id: Optional[str] = Field(default=None, alias="projectId")
    title: str = ""
    content: Optional[str] = None
    document_type: Optional[str] = Field(default=None, alias="documentType")
    file_path: Optional[str] = Field(default=None, alias="filePath")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")


class Project(ResourceModel):
    id: str
    user_id: Optional[str] = Field(default=None, alias="userId")
    title: str = ""
    description: Optional[str] = None
    status: Optional[str] = None
    research_domain: Optional[str] = Field(default=None, alias="researchDomain")
    documents: List[Document] = Field(default_factory=list)
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")


class ExtractionStatus(ResourceModel):
    job_id: Optional[str] = Field(default=None, alias="jobId")
    paper_id: str = Field(alias="paperId")
    status: str
    message: Optional[str] = None
    b2_url: Optional[str] = Field(default=None, alias="b2Url")
    started_at: Optional[str] = Field(default=None, alias="startedAt")
    completed_at: Optional[str] = Field(default=None, alias="completedAt")
    progress: Optional[float] = None
    error: Optional[str] = None


class SummarizationStatus(ResourceModel):
    paper_id: str = Field(alias="paperId")
    is_summarized: bool = Field(default=False, alias="isSummarized")
    summarization_status: Optional[str] = Field(
        default=None, alias="summarizationStatus"
    )
    summarization_started_at: Optional[str] = Field(
        default=None, alias="summarizationStartedAt"
    )
    summarization_completed_at: Optional[str] = Field(
        default=None, alias="summarizationCompletedAt"
    )
    summarization_error: Optional[str] = Field(
        default=None, alias="summarizationError"
    )


class PaperSummary(ResourceModel):
    """
    Generated paper summary. Only the commonly used fields are typed; the
    remaining sections (datasets, ethics, evidence anchors, ...) are kept as
    extra attributes.
    """

    id: str
    paper_id: str = Field(alias="paperId")
    one_liner: Optional[str] = Field(default=None, alias="oneLiner")
    key_contributions: List[str] = Field(
        default_factory=list, alias="keyContributions"
    )
    method_overview: Optional[str] = Field(default=None, alias="methodOverview")
    main_findings: List[Dict[str, Any]] = Field(
        default_factory=list, alias="mainFindings"
    )
    limitations: List[str] = Field(default_factory=list)
    repro_score: Optional[float] = Field(default=None, alias="reproScore")
    confidence: Optional[float] = None
    model_version: Optional[str] = Field(default=None, alias="modelVersion")
    validation_status: Optional[str] = Field(default=None, alias="validationStatus")
    validation_notes: Optional[str] = Field(default=None, alias="validationNotes")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class ScholarBotHealth(ResourceModel):
    status: str

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class LibraryStats(ResourceModel):
    project_id: str = Field(alias="projectId")
    correlation_ids: List[str] = Field(default_factory=list, alias="correlationIds")
    total_papers: int = Field(default=0, alias="totalPapers")
    completed_search_operations: int = Field(
        default=0, alias="completedSearchOperations"
    )
    retrieved_at: Optional[str] = Field(default=None, alias="retrievedAt")
    message: Optional[str] = None


class Library(LibraryStats):
    papers: List[Dict[str, Any]] = Field(default_factory=list)
