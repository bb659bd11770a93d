"""Validation findings about FHIR resources."""

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
from dsf_linter.model.finding_type import ValidationType
from dsf_linter.model.item import FhirValidationItem
from dsf_linter.model.location import FileHandle
from dsf_linter.model.severity import ValidationSeverity

ERROR = ValidationSeverity.ERROR
WARN = ValidationSeverity.WARN
INFO = ValidationSeverity.INFO


class FhirElementValidationItemSuccess(FhirValidationItem):
    finding_type = ValidationType.SUCCESS
    default_severity = ValidationSeverity.SUCCESS
    default_message = "FHIR element validation passed"


# ---------------------------------------------------------------------------
# Access control and ActivityDefinition
# ---------------------------------------------------------------------------


class FhirMissingFhirAccessTagValidationItem(FhirValidationItem):
    finding_type = ValidationType.MISSING_FHIR_ACCESS_TAG
    default_severity = ERROR
    default_message = "Missing FHIR access tag"


class FhirNoExtensionProcessAuthorizationFoundValidationItem(NoProcessAuthorizationFinding, FhirValidationItem):
    finding_type = ValidationType.NO_EXTENSION_PROCESS_AUTHORIZATION_FOUND
    default_severity = ERROR
    default_message = "No extension-process-authorization found in file: {file}"


class FhirActivityDefinitionEntryMissingRequesterValidationItem(FhirValidationItem):
    finding_type = ValidationType.ACTIVITY_DEFINITION_ENTRY_MISSING_REQUESTER
    default_severity = ERROR
    default_message = "No <extension url='requester'> found in process-authorization."


class FhirActivityDefinitionEntryMissingRecipientValidationItem(FhirValidationItem):
    finding_type = ValidationType.ACTIVITY_DEFINITION_ENTRY_MISSING_RECIPIENT
    default_severity = ERROR
    default_message = "No <extension url='recipient'> found in process-authorization."


class FhirKindNotSetAsTaskValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_KIND_NOT_SET_AS_TASK
    default_severity = ERROR
    default_message = "ActivityDefinition <kind> must be set to 'Task'."


# ---------------------------------------------------------------------------
# Task
# ---------------------------------------------------------------------------


class FhirTaskMissingIdValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_MISSING_ID
    default_severity = INFO
    default_message = "Task is missing <id> or it is empty."


class FhirTaskMissingProfileValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_MISSING_PROFILE
    default_severity = ERROR
    default_message = "Task is missing <meta.profile> or it is empty."


class FhirTaskMissingInstantiatesCanonicalValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_MISSING_INSTANTIATES_CANONICAL
    default_severity = ERROR
    default_message = "Task is missing <instantiatesCanonical>."


class FhirTaskUnknownInstantiatesCanonicalValidationItem(FhirValidationItem):
    finding_type = ValidationType.TASK_UNKNOWN_INSTANTIATES_CANONICAL
    default_severity = ERROR
    default_message = "Task contains an instantiatesCanonical reference to an unknown canonical URL."


class FhirTaskInstantiatesCanonicalPlaceholderValidationItem(FhirValidationItem):
    finding_type = ValidationType.TASK_INSTANTIATES_CANONICAL_PLACEHOLDER
    default_severity = WARN
    default_message = "The <instantiatesCanonical> element is missing expected placeholder values (e.g., #{version})."


class FhirTaskStatusNotDraftValidationItem(FhirValidationItem):
    finding_type = ValidationType.TASK_STATUS_NOT_DRAFT
    default_severity = ERROR
    default_message = "The <status> element must be set to 'draft'."


class FhirTaskValueIsNotSetAsOrderValidationItem(FhirValidationItem):
    finding_type = ValidationType.TASK_INTENT_NOT_ORDER
    default_severity = ERROR
    default_message = "Task.intent must be fixed to 'order'."


class FhirTaskMissingRequesterValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_MISSING_REQUESTER
    default_severity = ERROR
    default_message = "Task.requester element is missing."


class FhirTaskInvalidRequesterValidationItem(FhirValidationItem):
    finding_type = ValidationType.INVALID_TASK_REQUESTER_SYSTEM
    default_severity = ERROR
    default_message = "Task.requester.identifier.system must be 'http://dsf.dev/sid/organization-identifier'."


class FhirTaskRequesterIdNotExistValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_REQUESTER_ID_MISSING
    default_severity = ERROR
    default_message = "Task.requester.identifier.value is missing."


class FhirTaskRequesterIdNoPlaceholderValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_REQUESTER_ID_NO_PLACEHOLDER
    default_severity = WARN
    default_message = "Task.requester.identifier.value does not contain the '#{organization}' placeholder."


class FhirTaskRequesterOrganizationNoPlaceholderValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_REQUESTER_ORGANIZATION_NO_PLACEHOLDER
    default_severity = WARN
    default_message = "Required field does not contain a dynamic placeholder"


class FhirTaskRequesterNotAuthorisedValidationItem(FhirValidationItem):
    """The requesting organisation is not allowed by the ActivityDefinition."""

    finding_type = ValidationType.FHIR_TASK_REQUESTER_NOT_AUTHORIZED
    default_severity = ERROR
    default_message = "Task requester is not authorised according to the ActivityDefinition."


class FhirTaskMissingRecipientValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_MISSING_RECIPIENT
    default_severity = ERROR
    default_message = "Task.restriction.recipient element is missing."


class FhirTaskInvalidRecipientValidationItem(FhirValidationItem):
    finding_type = ValidationType.INVALID_TASK_RECIPIENT_SYSTEM
    default_severity = ERROR
    default_message = "Task.restriction.recipient.identifier.system must be 'http://dsf.dev/sid/organization-identifier'."


class FhirTaskRecipientIdNotExistValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_RECIPIENT_ID_MISSING
    default_severity = ERROR
    default_message = "Task.restriction.recipient.identifier.value is missing."


class FhirTaskRecipientIdNoPlaceholderValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_RECIPIENT_ID_NO_PLACEHOLDER
    default_severity = ERROR
    default_message = "Task.restriction.recipient.identifier.value does not contain the '#{organization}' placeholder."


class FhirTaskRecipientOrganizationNoPlaceholderValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_RECIPIENT_ORGANIZATION_NO_PLACEHOLDER
    default_severity = WARN
    default_message = "Required field does not contain a dynamic placeholder"


class FhirTaskDateNoPlaceholderValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_DATE_NO_PLACEHOLDER
    default_severity = WARN
    default_message = "The <authoredOn> date field is missing the placeholder '#{date}'."


class FhirTaskMissingInputValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_MISSING_INPUT
    default_severity = ERROR
    default_message = "Task is missing <input> or it is empty."


class FhirTaskInputMissingValueValidationItem(FhirValidationItem):
    finding_type = ValidationType.TASK_INPUT_MISSING_VALUE
    default_severity = ERROR
    default_message = "Task.input is missing a value[x] element."


class FhirTaskInputRequiredCodingSystemAndCodingCodeValidationItem(FhirValidationItem):
    finding_type = ValidationType.TASK_INPUT_MISSING_SYSTEM_OR_CODE
    default_severity = ERROR
    default_message = "A <Task.input> element is missing <type><coding><system> or <code>."


class FhirTaskRequiredInputWithCodeMessageNameValidationItem(FhirValidationItem):
    finding_type = ValidationType.TASK_INPUT_MISSING_MESSAGE_NAME
    default_severity = ERROR
    default_message = "Task must contain exactly one input slice with code 'message-name'."


class FhirTaskInputDuplicateSliceValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_DUPLICATE_SLICE
    default_severity = ERROR
    default_message = "Task contains duplicate input slices with the same identifying code."


class FhirTaskUnknownCodeValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_UNKNOWN_CODE
    default_severity = ERROR
    default_message = "Task contains unknown or unsupported code in a coding element."


class FhirTaskBusinessKeyExistsValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_BUSINESS_KEY_EXISTS
    default_severity = ERROR
    default_message = "Task contains a 'business-key' input when it must not be present."


class FhirTaskBusinessKeyCheckIsSkippedValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_BUSINESS_KEY_CHECK_SKIPPED
    default_severity = INFO
    default_message = "Business key validation check was skipped for this Task status."


class FhirTaskStatusRequiredInputBusinessKeyValidationItem(FhirValidationItem):
    finding_type = ValidationType.TASK_BUSINESS_KEY_REQUIRED_FOR_STATUS
    default_severity = ERROR
    default_message = (
        "Task.status is one of 'in-progress', 'completed', or 'failed', "
        "so a 'business-key' input is required but missing."
    )


class FhirTaskCorrelationExistsValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_CORRELATION_KEY_EXISTS
    default_severity = ERROR
    default_message = "Task contains a 'correlation-key' input which is not allowed."


class FhirTaskCorrelationMissingButRequiredValidationItem(RequiredMinFinding, FhirValidationItem):
    finding_type = ValidationType.TASK_CORRELATION_KEY_REQUIRED_BUT_MISSING
    default_severity = ERROR
    default_message = "Missing input 'correlation-key', but StructureDefinition requires at least {required_min} occurrence(s)."


class FhirTaskMissingErrorOutputValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_TASK_MISSING_ERROR_OUTPUT
    default_severity = ERROR
    default_message = "Task in error state is missing required output of type 'error'."


class FhirTaskOutputMissingTypeCodingCodeValidationItem(FhirValidationItem):
    finding_type = ValidationType.TASK_OUTPUT_MISSING_CODE
    default_severity = ERROR
    default_message = "Task.output is missing <type><coding><code>."


class FhirTaskOutputMissingValueValidationItem(FhirValidationItem):
    finding_type = ValidationType.TASK_OUTPUT_MISSING_VALUE
    default_severity = ERROR
    default_message = "Task.output is missing a value[x] element."


# ---------------------------------------------------------------------------
# ValueSet
# ---------------------------------------------------------------------------


class FhirValueSetMissingUrlValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_MISSING_URL
    default_severity = ERROR
    default_message = "ValueSet is missing required <url> element"


class FhirValueSetMissingNameValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_MISSING_NAME
    default_severity = ERROR
    default_message = "ValueSet is missing required <name> element"


class FhirValueSetMissingTitleValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_MISSING_TITLE
    default_severity = ERROR
    default_message = "ValueSet is missing required <title> element"


class FhirValueSetMissingPublisherValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_MISSING_PUBLISHER
    default_severity = ERROR
    default_message = "ValueSet is missing required <publisher> element"


class FhirValueSetMissingDescriptionValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_MISSING_DESCRIPTION
    default_severity = ERROR
    default_message = "ValueSet is missing required <description> element"


class FhirValueSetMissingComposeIncludeValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_MISSING_COMPOSE_INCLUDE
    default_severity = ERROR
    default_message = "ValueSet is missing <compose><include> definition(s)"


class FhirValueSetIncludeMissingSystemValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_INCLUDE_MISSING_SYSTEM
    default_severity = ERROR
    default_message = "ValueSet <compose><include> is missing <system>"


class FhirValueSetMissingReadAccessTagValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_MISSING_READ_ACCESS_TAG
    default_severity = ERROR
    default_message = "ValueSet is missing a read-access tag with code 'ALL' or 'LOCAL'"


class FhirValueSetVersionNoPlaceholderValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_VERSION_NO_PLACEHOLDER
    default_severity = WARN
    default_message = "ValueSet <version> must contain the placeholder '#{version}'"


class FhirValueSetDateNoPlaceholderValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_DATE_NO_PLACEHOLDER
    default_severity = WARN
    default_message = "ValueSet <date> must contain the placeholder '#{date}'"


class FhirValueSetIncludeVersionPlaceholderValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_INCLUDE_VERSION_PLACEHOLDER
    default_severity = WARN
    default_message = "ValueSet <compose><include><version> must contain the placeholder '#{version}'"


class FhirValueSetConceptMissingCodeValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_CONCEPT_MISSING_CODE
    default_severity = ERROR
    default_message = "ValueSet <concept> element is missing required <code>"


class FhirValueSetDuplicateConceptCodeValidationItem(ConceptCodeFinding, FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_DUPLICATE_CONCEPT_CODE
    default_severity = WARN
    default_message = "ValueSet contains duplicate concept code '{code}'"


class FhirValueSetFalseUrlReferencedValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_FALSE_URL_REFERENCED
    default_severity = ERROR
    default_message = "ValueSet include references a CodeSystem url that does not contain the code"


class FhirValueSetUnknownCodeValidationItem(ConceptCodeFinding, FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_UNKNOWN_CODE
    default_severity = ERROR
    default_message = "ValueSet references code '{code}' which no known CodeSystem defines"


class FhirValueSetOrganizationRoleMissingValidCodeValueValidationItem(FhirValidationItem):
    finding_type = ValidationType.FHIR_VALUE_SET_ORGANIZATION_ROLE_MISSING_VALID_CODE_VALUE
    default_severity = ERROR
    default_message = "ValueSet organization role extension is missing a valid code value"


# ---------------------------------------------------------------------------
# CodeSystem
# ---------------------------------------------------------------------------


class FhirCodeSystemMissingElementValidationItem(ElementNameFinding, FhirValidationItem):
    finding_type = ValidationType.CODE_SYSTEM_MISSING_ELEMENT
    default_severity = ERROR
    default_message = "CodeSystem is missing required element <{element_name}>."


class FhirCodeSystemMissingConceptValidationItem(FhirValidationItem):
    finding_type = ValidationType.CODE_SYSTEM_MISSING_CONCEPT
    default_severity = WARN
    default_message = "CodeSystem is missing required <concept> elements."


class FhirCodeSystemMissingReadAccessTagValidationItem(FhirValidationItem):
    finding_type = ValidationType.CODE_SYSTEM_MISSING_READ_ACCESS_TAG
    default_severity = ERROR
    default_message = (
        "CodeSystem is missing required meta.tag with system "
        "'http://dsf.dev/fhir/CodeSystem/read-access-tag' and code 'ALL'."
    )


class FhirCodeSystemInvalidUrlValidationItem(FhirValidationItem):
    finding_type = ValidationType.CODE_SYSTEM_INVALID_URL
    default_severity = ERROR
    default_message = "CodeSystem <url> must start with 'http://dsf.dev/fhir/CodeSystem/'."


class FhirCodeSystemInvalidStatusValidationItem(ActualValueFinding, FhirValidationItem):
    finding_type = ValidationType.CODE_SYSTEM_INVALID_STATUS
    default_severity = ERROR
    default_message = "CodeSystem <status> must be 'unknown' (found '{actual}')."


class FhirCodeSystemConceptMissingDisplayValidationItem(FhirValidationItem):
    finding_type = ValidationType.CODE_SYSTEM_CONCEPT_MISSING_DISPLAY
    default_severity = ERROR
    default_message = "CodeSystem <concept> element is missing required <display>."


class FhirCodeSystemVersionNoPlaceholderValidationItem(FhirValidationItem):
    finding_type = ValidationType.CODE_SYSTEM_VERSION_NO_PLACEHOLDER
    default_severity = WARN
    default_message = "The <version> element is missing the placeholder '#{version}'."


class FhirCodeSystemDateNoPlaceholderValidationItem(FhirValidationItem):
    finding_type = ValidationType.CODE_SYSTEM_DATE_NO_PLACEHOLDER
    default_severity = WARN
    default_message = "The <date> element is missing the placeholder '#{date}'."


# ---------------------------------------------------------------------------
# Questionnaire
# ---------------------------------------------------------------------------


class FhirQuestionnaireMissingMetaProfileValidationItem(FhirValidationItem):
    finding_type = ValidationType.QUESTIONNAIRE_MISSING_META_PROFILE
    default_severity = ERROR
    default_message = "Questionnaire <meta.profile> is missing."


class FhirQuestionnaireMissingReadAccessTagValidationItem(FhirValidationItem):
    finding_type = ValidationType.QUESTIONNAIRE_MISSING_READ_ACCESS_TAG
    default_severity = ERROR
    default_message = "Questionnaire is missing a read-access tag with code 'ALL' or 'LOCAL'."


class FhirQuestionnaireInvalidUrlValidationItem(FhirValidationItem):
    finding_type = ValidationType.QUESTIONNAIRE_INVALID_URL
    default_severity = ERROR
    default_message = "Questionnaire <url> must be '{expected_url}' (found: '{actual_url}')."

    def __init__(
        self,
        resource_file: FileHandle,
        fhir_reference: str | None,
        expected_url: str,
        actual_url: str | None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            resource_file,
            fhir_reference,
            self.compose_message(message, expected_url=expected_url, actual_url=actual_url),
            details={"expectedUrl": expected_url, "actualUrl": actual_url},
        )


class FhirQuestionnaireInvalidStatusValidationItem(ActualValueFinding, FhirValidationItem):
    finding_type = ValidationType.QUESTIONNAIRE_INVALID_STATUS
    default_severity = INFO
    default_message = "Questionnaire <status> should be 'unknown' (found: '{actual}')."


class FhirQuestionnaireVersionNoPlaceholderValidationItem(FhirValidationItem):
    finding_type = ValidationType.QUESTIONNAIRE_VERSION_NO_PLACEHOLDER
    default_severity = ERROR
    default_message = "Questionnaire <version> must contain the placeholder '#{version}'."


class FhirQuestionnaireDateNoPlaceholderValidationItem(FhirValidationItem):
    finding_type = ValidationType.QUESTIONNAIRE_DATE_NO_PLACEHOLDER
    default_severity = ERROR
    default_message = "Questionnaire <date> must contain the placeholder '#{date}'."


class FhirQuestionnaireMissingItemValidationItem(FhirValidationItem):
    finding_type = ValidationType.QUESTIONNAIRE_MISSING_ITEM
    default_severity = WARN
    default_message = "Questionnaire contains no <item> elements."


class FhirQuestionnaireItemMissingAttributesLinkIdValidationItem(FhirValidationItem):
    finding_type = ValidationType.QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_LINK_ID
    default_severity = ERROR
    default_message = "Questionnaire item is missing required attribute(s): linkId or type."


class FhirQuestionnaireItemMissingAttributesTextValidationItem(FhirValidationItem):
    finding_type = ValidationType.QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_TEXT
    default_severity = INFO
    default_message = "Questionnaire item is missing optional attribute: text."


class FhirQuestionnaireItemMissingAttributesTypeValidationItem(FhirValidationItem):
    finding_type = ValidationType.QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_TYPE
    default_severity = ERROR
    default_message = "Questionnaire item is missing required attribute: type."


class FhirQuestionnaireDuplicateLinkIdValidationItem(LinkIdFinding, FhirValidationItem):
    finding_type = ValidationType.QUESTIONNAIRE_DUPLICATE_LINK_ID
    default_severity = WARN
    default_message = "Duplicate Questionnaire item linkId detected: '{link_id}'"


class FhirQuestionnaireUnusualLinkIdValidationItem(LinkIdFinding, FhirValidationItem):
    finding_type = ValidationType.QUESTIONNAIRE_UNUSUAL_LINK_ID
    default_severity = WARN
    default_message = "Questionnaire item <linkId> '{link_id}' does not match the expected pattern [a-z0-9\\-]+."


class FhirQuestionnaireMandatoryItemNotRequiredValidationItem(LinkIdFinding, FhirValidationItem):
    finding_type = ValidationType.QUESTIONNAIRE_MANDATORY_ITEM_NOT_REQUIRED
    default_severity = ERROR
    default_message = "Mandatory item '{link_id}' must include required=\"true\"."


class FhirQuestionnaireMandatoryItemInvalidTypeValidationItem(MandatoryItemTypeFinding, FhirValidationItem):
    finding_type = ValidationType.QUESTIONNAIRE_MANDATORY_ITEM_INVALID_TYPE
    default_severity = ERROR
    default_message = "Mandatory item '{link_id}' must have type='string' (found: '{actual_type}')."


# ---------------------------------------------------------------------------
# StructureDefinition
# ---------------------------------------------------------------------------


class FhirStructureDefinitionSliceMaxTooHighValidationItem(SliceCardinalityFinding, FhirValidationItem):
    finding_type = ValidationType.STRUCTURE_DEFINITION_SLICE_MAX_TOO_HIGH
    default_severity = ERROR
    default_message = "Element '{element_id}' declares max={base} but a slice allows up to {slices}"


class FhirStructureDefinitionSliceMinTooLowValidationItem(SliceCardinalityFinding, FhirValidationItem):
    finding_type = ValidationType.STRUCTURE_DEFINITION_SLICE_MIN_TOO_LOW
    default_severity = ERROR
    default_message = "Element '{element_id}' declares min={base} but the sum of slice.min values is only {slices}"


class FhirStructureDefinitionSliceMinSumAboveBaseMinValidationItem(SliceCardinalityFinding, FhirValidationItem):
    finding_type = ValidationType.STRUCTURE_DEFINITION_SLICE_MIN_SUM_ABOVE_BASE_MIN
    default_severity = INFO
    default_message = "Element '{element_id}' declares min={base} but the slices require at least {slices}"
