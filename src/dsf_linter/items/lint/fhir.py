"""Lint findings about FHIR resources.

Grouped by resource kind: access control, ActivityDefinition, Task,
ValueSet, CodeSystem, Questionnaire and StructureDefinition.
"""

from __future__ import annotations

from dsf_linter.items.common import (
    ActualValueFinding,
    ConceptCodeFinding,
    ElementNameFinding,
    LinkIdFinding,
    MandatoryItemTypeFinding,
    NoProcessAuthorizationFinding,
    RequiredMinFinding,
    SliceCardinalityFinding,
)
from dsf_linter.model.finding_type import LintType
from dsf_linter.model.item import FhirLintItem
from dsf_linter.model.location import FileHandle
from dsf_linter.model.severity import LintSeverity

ERROR = LintSeverity.ERROR
WARN = LintSeverity.WARN
INFO = LintSeverity.INFO


class FhirElementLintItemSuccess(FhirLintItem):
    """A FHIR resource passed a check."""

    finding_type = LintType.SUCCESS
    default_severity = LintSeverity.SUCCESS
    default_message = "FHIR element check passed"


# ---------------------------------------------------------------------------
# Access control and ActivityDefinition
# ---------------------------------------------------------------------------


class FhirMissingFhirAccessTagLintItem(FhirLintItem):
    finding_type = LintType.MISSING_FHIR_ACCESS_TAG
    default_severity = ERROR
    default_message = "Missing FHIR access tag"


class FhirNoExtensionProcessAuthorizationFoundLintItem(NoProcessAuthorizationFinding, FhirLintItem):
    finding_type = LintType.NO_EXTENSION_PROCESS_AUTHORIZATION_FOUND
    default_severity = ERROR
    default_message = "No extension-process-authorization found in file: {file}"


class FhirActivityDefinitionEntryMissingRequesterLintItem(FhirLintItem):
    finding_type = LintType.ACTIVITY_DEFINITION_ENTRY_MISSING_REQUESTER
    default_severity = ERROR
    default_message = "No <extension url='requester'> found in process-authorization."


class FhirActivityDefinitionEntryMissingRecipientLintItem(FhirLintItem):
    finding_type = LintType.ACTIVITY_DEFINITION_ENTRY_MISSING_RECIPIENT
    default_severity = ERROR
    default_message = "No <extension url='recipient'> found in process-authorization."


class FhirActivityDefinitionMissingProfileLintItem(FhirLintItem):
    finding_type = LintType.ACTIVITY_DEFINITION_MISSING_PROFILE
    default_severity = WARN
    default_message = (
        "ActivityDefinition is missing the expected profile "
        "'http://dsf.dev/fhir/StructureDefinition/activity-definition' in <meta><profile>."
    )


class FhirActivityDefinitionProfileHasVersionNumberLintItem(FhirLintItem):
    finding_type = LintType.ACTIVITY_DEFINITION_PROFILE_HAS_VERSION_NUMBER
    default_severity = ERROR
    default_message = (
        "ActivityDefinition profile must not contain a version number. "
        "Use 'http://dsf.dev/fhir/StructureDefinition/activity-definition' without '|x.x.x'."
    )


class FhirKindNotSetAsTaskLintItem(FhirLintItem):
    finding_type = LintType.FHIR_KIND_NOT_SET_AS_TASK
    default_severity = ERROR
    default_message = "ActivityDefinition <kind> must be set to 'Task'."


# ---------------------------------------------------------------------------
# Task
# ---------------------------------------------------------------------------


class FhirTaskMissingProfileLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_MISSING_PROFILE
    default_severity = ERROR
    default_message = "Task is missing <meta.profile> or it is empty."


class FhirTaskMissingInstantiatesCanonicalLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_MISSING_INSTANTIATES_CANONICAL
    default_severity = ERROR
    default_message = "Task is missing <instantiatesCanonical>."


class FhirTaskUnknownInstantiatesCanonicalLintItem(FhirLintItem):
    finding_type = LintType.TASK_UNKNOWN_INSTANTIATES_CANONICAL
    default_severity = ERROR
    default_message = "Task contains an instantiatesCanonical reference to an unknown canonical URL."


class FhirTaskInstantiatesCanonicalPlaceholderLintItem(FhirLintItem):
    finding_type = LintType.TASK_INSTANTIATES_CANONICAL_PLACEHOLDER
    default_severity = WARN
    default_message = "The <instantiatesCanonical> element is missing expected placeholder values (e.g., #{version})."


class FhirTaskMissingStatusLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_MISSING_STATUS
    default_severity = ERROR
    default_message = "Task is missing <status> or it is empty."


class FhirTaskStatusNotDraftLintItem(FhirLintItem):
    finding_type = LintType.TASK_STATUS_NOT_DRAFT
    default_severity = ERROR
    default_message = "The <status> element must be set to 'draft'."


class FhirTaskValueIsNotSetAsOrderLintItem(FhirLintItem):
    finding_type = LintType.TASK_INTENT_NOT_ORDER
    default_severity = ERROR
    default_message = "Task.intent must be fixed to 'order'."


class FhirTaskMissingRequesterLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_MISSING_REQUESTER
    default_severity = ERROR
    default_message = "Task.requester element is missing."


class FhirTaskInvalidRequesterLintItem(FhirLintItem):
    finding_type = LintType.INVALID_TASK_REQUESTER_SYSTEM
    default_severity = ERROR
    default_message = "Task.requester.identifier.system must be 'http://dsf.dev/sid/organization-identifier'."


class FhirTaskRequesterIdNoPlaceholderLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_REQUESTER_ID_NO_PLACEHOLDER
    default_severity = WARN
    default_message = "Task.requester.identifier.value does not contain the '#{organization}' placeholder."


class FhirTaskMissingRecipientLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_MISSING_RECIPIENT
    default_severity = ERROR
    default_message = "Task.restriction.recipient element is missing."


class FhirTaskInvalidRecipientLintItem(FhirLintItem):
    finding_type = LintType.INVALID_TASK_RECIPIENT_SYSTEM
    default_severity = ERROR
    default_message = "Task.restriction.recipient.identifier.system must be 'http://dsf.dev/sid/organization-identifier'."


class FhirTaskRecipientIdNotExistLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_RECIPIENT_ID_MISSING
    default_severity = ERROR
    default_message = "Task.restriction.recipient.identifier.value is missing."


class FhirTaskRecipientIdNoPlaceholderLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_RECIPIENT_ID_NO_PLACEHOLDER
    default_severity = ERROR
    default_message = "Task.restriction.recipient.identifier.value does not contain the '#{organization}' placeholder."


class FhirTaskRecipientOrganizationNoPlaceholderLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_RECIPIENT_ORGANIZATION_NO_PLACEHOLDER
    default_severity = WARN
    default_message = "Required field does not contain a dynamic placeholder"


class FhirTaskDateNoPlaceholderLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_DATE_NO_PLACEHOLDER
    default_severity = WARN
    default_message = "The <authoredOn> date field is missing the placeholder '#{date}'."


class FhirTaskMissingInputLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_MISSING_INPUT
    default_severity = ERROR
    default_message = "Task is missing <input> or it is empty."


class FhirTaskInputMissingValueLintItem(FhirLintItem):
    finding_type = LintType.TASK_INPUT_MISSING_VALUE
    default_severity = ERROR
    default_message = "Task.input is missing a value[x] element."


class FhirTaskInputRequiredCodingSystemAndCodingCodeLintItem(FhirLintItem):
    finding_type = LintType.TASK_INPUT_MISSING_SYSTEM_OR_CODE
    default_severity = ERROR
    default_message = "A <Task.input> element is missing <type><coding><system> or <code>."


class FhirTaskRequiredInputWithCodeMessageNameLintItem(FhirLintItem):
    finding_type = LintType.TASK_INPUT_MISSING_MESSAGE_NAME
    default_severity = ERROR
    default_message = "Task must contain exactly one input slice with code 'message-name'."


class FhirTaskInputDuplicateSliceLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_DUPLICATE_SLICE
    default_severity = ERROR
    default_message = "Task contains duplicate input slices with the same identifying code."


class FhirTaskUnknownCodeLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_UNKNOWN_CODE
    default_severity = ERROR
    default_message = "Task contains unknown or unsupported code in a coding element."


class FhirTaskInputInstanceCountBelowMinLintItem(FhirLintItem):
    """Task carries fewer inputs than its StructureDefinition requires."""

    finding_type = LintType.FHIR_TASK_INPUT_INSTANCE_COUNT_BELOW_MIN
    default_severity = ERROR
    default_message = "Task contains {actual_count} input(s), but at least {minimum} required."

    def __init__(
        self,
        resource_file: FileHandle,
        fhir_reference: str | None,
        actual_count: int,
        minimum: int,
        message: str | None = None,
    ) -> None:
        super().__init__(
            resource_file,
            fhir_reference,
            self.compose_message(message, actual_count=actual_count, minimum=minimum),
            details={"actualCount": actual_count, "minimum": minimum},
        )


class FhirTaskInputInstanceCountExceedsMaxLintItem(FhirLintItem):
    """Task carries more inputs than its StructureDefinition allows."""

    finding_type = LintType.FHIR_TASK_INPUT_INSTANCE_COUNT_EXCEEDS_MAX
    default_severity = ERROR
    default_message = "Task contains {actual_count} input(s), but at most {maximum} allowed."

    def __init__(
        self,
        resource_file: FileHandle,
        fhir_reference: str | None,
        actual_count: int,
        maximum: int | str,
        message: str | None = None,
    ) -> None:
        super().__init__(
            resource_file,
            fhir_reference,
            self.compose_message(message, actual_count=actual_count, maximum=maximum),
            details={"actualCount": actual_count, "maximum": maximum},
        )


class FhirTaskBusinessKeyExistsLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_BUSINESS_KEY_EXISTS
    default_severity = ERROR
    default_message = "Task contains a 'business-key' input when it must not be present."


class FhirTaskBusinessKeyCheckIsSkippedLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_BUSINESS_KEY_CHECK_SKIPPED
    default_severity = INFO
    default_message = "Business key linting check was skipped for this Task status."


class FhirTaskStatusRequiredInputBusinessKeyLintItem(FhirLintItem):
    finding_type = LintType.TASK_BUSINESS_KEY_REQUIRED_FOR_STATUS
    default_severity = ERROR
    default_message = (
        "Task.status is one of 'in-progress', 'completed', or 'failed', "
        "so a 'business-key' input is required but missing."
    )


class FhirTaskCorrelationExistsLintItem(FhirLintItem):
    finding_type = LintType.FHIR_TASK_CORRELATION_KEY_EXISTS
    default_severity = ERROR
    default_message = "Task contains a 'correlation-key' input which is not allowed."


class FhirTaskCorrelationMissingButRequiredLintItem(RequiredMinFinding, FhirLintItem):
    finding_type = LintType.TASK_CORRELATION_KEY_REQUIRED_BUT_MISSING
    default_severity = ERROR
    default_message = "Missing input 'correlation-key', but StructureDefinition requires at least {required_min} occurrence(s)."


# ---------------------------------------------------------------------------
# ValueSet
# ---------------------------------------------------------------------------


class FhirValueSetMissingUrlLintItem(FhirLintItem):
    finding_type = LintType.FHIR_VALUE_SET_MISSING_URL
    default_severity = ERROR
    default_message = "ValueSet is missing required <url> element"


class FhirValueSetMissingNameLintItem(FhirLintItem):
    finding_type = LintType.FHIR_VALUE_SET_MISSING_NAME
    default_severity = ERROR
    default_message = "ValueSet is missing required <name> element"


class FhirValueSetMissingDescriptionLintItem(FhirLintItem):
    finding_type = LintType.FHIR_VALUE_SET_MISSING_DESCRIPTION
    default_severity = ERROR
    default_message = "ValueSet is missing required <description> element"


class FhirValueSetMissingComposeIncludeLintItem(FhirLintItem):
    finding_type = LintType.FHIR_VALUE_SET_MISSING_COMPOSE_INCLUDE
    default_severity = ERROR
    default_message = "ValueSet is missing <compose><include> definition(s)"


class FhirValueSetMissingReadAccessTagAllOrLocalLintItem(FhirLintItem):
    finding_type = LintType.FHIR_VALUE_SET_MISSING_READ_ACCESS_TAG_ALL_OR_LOCAL
    default_severity = ERROR
    default_message = "ValueSet is missing a read-access tag with code 'ALL' or 'LOCAL'"


class FhirValueSetVersionNoPlaceholderLintItem(FhirLintItem):
    finding_type = LintType.FHIR_VALUE_SET_VERSION_NO_PLACEHOLDER
    default_severity = WARN
    default_message = "ValueSet <version> must contain the placeholder '#{version}'"


class FhirValueSetConceptMissingCodeLintItem(FhirLintItem):
    finding_type = LintType.FHIR_VALUE_SET_CONCEPT_MISSING_CODE
    default_severity = ERROR
    default_message = "ValueSet <concept> element is missing required <code>"


class FhirValueSetDuplicateConceptCodeLintItem(ConceptCodeFinding, FhirLintItem):
    finding_type = LintType.FHIR_VALUE_SET_DUPLICATE_CONCEPT_CODE
    default_severity = WARN
    default_message = "ValueSet contains duplicate concept code '{code}'"


class FhirValueSetFalseUrlReferencedLintItem(FhirLintItem):
    finding_type = LintType.FHIR_VALUE_SET_FALSE_URL_REFERENCED
    default_severity = ERROR
    default_message = "ValueSet include references a CodeSystem url that does not contain the code"


class FhirValueSetOrganizationRoleMissingValidCodeValueLintItem(FhirLintItem):
    finding_type = LintType.FHIR_VALUE_SET_ORGANIZATION_ROLE_MISSING_VALID_CODE_VALUE
    default_severity = ERROR
    default_message = "ValueSet organization role extension is missing a valid code value"


# ---------------------------------------------------------------------------
# CodeSystem
# ---------------------------------------------------------------------------


class FhirCodeSystemMissingReadAccessTagLintItem(FhirLintItem):
    finding_type = LintType.MISSING_READ_ACCESS_TAG
    default_severity = ERROR
    default_message = (
        "CodeSystem is missing required meta.tag with system "
        "'http://dsf.dev/fhir/CodeSystem/read-access-tag' and code 'ALL'."
    )


class FhirCodeSystemMissingElementLintItem(ElementNameFinding, FhirLintItem):
    finding_type = LintType.CODE_SYSTEM_MISSING_ELEMENT
    default_severity = ERROR
    default_message = "CodeSystem is missing required element <{element_name}>."


class FhirCodeSystemMissingConceptLintItem(FhirLintItem):
    finding_type = LintType.CODE_SYSTEM_MISSING_CONCEPT
    default_severity = WARN
    default_message = "CodeSystem is missing required <concept> elements."


class FhirCodeSystemInvalidUrlLintItem(FhirLintItem):
    finding_type = LintType.CODE_SYSTEM_INVALID_URL
    default_severity = ERROR
    default_message = "CodeSystem <url> must start with 'http://dsf.dev/fhir/CodeSystem/'."


class FhirCodeSystemInvalidStatusLintItem(ActualValueFinding, FhirLintItem):
    finding_type = LintType.CODE_SYSTEM_INVALID_STATUS
    default_severity = ERROR
    default_message = "CodeSystem <status> must be 'unknown' (found '{actual}')."


class FhirCodeSystemConceptMissingCodeLintItem(FhirLintItem):
    finding_type = LintType.CODE_SYSTEM_CONCEPT_MISSING_CODE
    default_severity = ERROR
    default_message = "CodeSystem <concept> element is missing required <code>."


class FhirCodeSystemConceptMissingDisplayLintItem(FhirLintItem):
    finding_type = LintType.CODE_SYSTEM_CONCEPT_MISSING_DISPLAY
    default_severity = ERROR
    default_message = "CodeSystem <concept> element is missing required <display>."


class FhirCodeSystemVersionNoPlaceholderLintItem(FhirLintItem):
    finding_type = LintType.CODE_SYSTEM_VERSION_NO_PLACEHOLDER
    default_severity = WARN
    default_message = "The <version> element is missing the placeholder '#{version}'."


class FhirCodeSystemDateNoPlaceholderLintItem(FhirLintItem):
    finding_type = LintType.CODE_SYSTEM_DATE_NO_PLACEHOLDER
    default_severity = WARN
    default_message = "The <date> element is missing the placeholder '#{date}'."


# ---------------------------------------------------------------------------
# Questionnaire
# ---------------------------------------------------------------------------


class FhirQuestionnaireMissingMetaProfileLintItem(FhirLintItem):
    finding_type = LintType.QUESTIONNAIRE_MISSING_META_PROFILE
    default_severity = ERROR
    default_message = "Questionnaire <meta.profile> is missing."


class FhirQuestionnaireInvalidMetaProfileLintItem(ActualValueFinding, FhirLintItem):
    finding_type = LintType.QUESTIONNAIRE_INVALID_META_PROFILE
    default_severity = ERROR
    default_message = (
        "Questionnaire <meta.profile> must start with "
        "'http://dsf.dev/fhir/StructureDefinition/questionnaire' (found: '{actual}')."
    )


class FhirQuestionnaireInvalidStatusLintItem(ActualValueFinding, FhirLintItem):
    finding_type = LintType.QUESTIONNAIRE_INVALID_STATUS
    default_severity = INFO
    default_message = "Questionnaire <status> should be 'unknown' (found: '{actual}')."


class FhirQuestionnaireVersionNoPlaceholderLintItem(FhirLintItem):
    finding_type = LintType.QUESTIONNAIRE_VERSION_NO_PLACEHOLDER
    default_severity = ERROR
    default_message = "Questionnaire <version> must contain the placeholder '#{version}'."


class FhirQuestionnaireDateNoPlaceholderLintItem(FhirLintItem):
    finding_type = LintType.QUESTIONNAIRE_DATE_NO_PLACEHOLDER
    default_severity = ERROR
    default_message = "Questionnaire <date> must contain the placeholder '#{date}'."


class FhirQuestionnaireMissingItemLintItem(FhirLintItem):
    finding_type = LintType.QUESTIONNAIRE_MISSING_ITEM
    default_severity = WARN
    default_message = "Questionnaire contains no <item> elements."


class FhirQuestionnaireItemMissingAttributesLinkIdLintItem(FhirLintItem):
    finding_type = LintType.QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_LINK_ID
    default_severity = ERROR
    default_message = "Questionnaire item is missing required attribute(s): linkId or type."


class FhirQuestionnaireItemMissingAttributesTextLintItem(FhirLintItem):
    finding_type = LintType.QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_TEXT
    default_severity = INFO
    default_message = "Questionnaire item is missing optional attribute: text."


class FhirQuestionnaireItemMissingAttributesTypeLintItem(FhirLintItem):
    finding_type = LintType.QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_TYPE
    default_severity = ERROR
    default_message = "Questionnaire item is missing required attribute: type."


class FhirQuestionnaireDuplicateLinkIdLintItem(LinkIdFinding, FhirLintItem):
    finding_type = LintType.QUESTIONNAIRE_DUPLICATE_LINK_ID
    default_severity = WARN
    default_message = "Duplicate Questionnaire item linkId detected: '{link_id}'"


class FhirQuestionnaireUnusualLinkIdLintItem(LinkIdFinding, FhirLintItem):
    finding_type = LintType.QUESTIONNAIRE_UNUSUAL_LINK_ID
    default_severity = WARN
    default_message = "Questionnaire item <linkId> '{link_id}' does not match the expected pattern [a-z0-9\\-]+."


class FhirQuestionnaireMandatoryItemNotRequiredLintItem(LinkIdFinding, FhirLintItem):
    finding_type = LintType.QUESTIONNAIRE_MANDATORY_ITEM_NOT_REQUIRED
    default_severity = ERROR
    default_message = "Mandatory item '{link_id}' must include required=\"true\"."


class FhirQuestionnaireMandatoryItemInvalidTypeLintItem(MandatoryItemTypeFinding, FhirLintItem):
    finding_type = LintType.QUESTIONNAIRE_MANDATORY_ITEM_INVALID_TYPE
    default_severity = ERROR
    default_message = "Mandatory item '{link_id}' must have type='string' (found: '{actual_type}')."


# ---------------------------------------------------------------------------
# StructureDefinition
# ---------------------------------------------------------------------------


class FhirStructureDefinitionSliceMaxExceedsBaseMaxLintItem(SliceCardinalityFinding, FhirLintItem):
    """``base`` is the element's max, ``slices`` the offending slice's max label."""

    finding_type = LintType.STRUCTURE_DEFINITION_SLICE_MAX_TOO_HIGH
    default_severity = ERROR
    default_message = "Element '{element_id}' declares max={base} but a slice allows up to {slices}"


class FhirStructureDefinitionSliceMinSumAboveBaseMinLintItem(SliceCardinalityFinding, FhirLintItem):
    finding_type = LintType.STRUCTURE_DEFINITION_SLICE_MIN_SUM_ABOVE_BASE_MIN
    default_severity = INFO
    default_message = "Element '{element_id}' declares min={base} but the sum of slice.min values is only {slices}"
