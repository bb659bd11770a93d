"""Closed taxonomies identifying which rule produced a finding.

Lint and validation keep separate enumerations. A condition checked in both
modes appears once in each, under the same name, but the members are never
interchangeable.
"""

from __future__ import annotations

from enum import StrEnum


class FindingType(StrEnum):
    """Base for both taxonomies; each member carries a default message."""

    default_message: str

    def __new__(cls, value: str, default_message: str = "") -> FindingType:
        member = str.__new__(cls, value)
        member._value_ = value
        member.default_message = default_message
        return member


# ---------------------------------------------------------------------------
# Lint
# ---------------------------------------------------------------------------


class LintType(FindingType):
    """Rules evaluated in lint mode."""

    UNKNOWN = "UNKNOWN", "Unknown lint finding"
    SUCCESS = "SUCCESS", "Check passed"

    # BPMN: tasks and implementations
    BPMN_SERVICE_TASK_NAME_EMPTY = "BPMN_SERVICE_TASK_NAME_EMPTY", "Service task name is empty"
    BPMN_SERVICE_TASK_IMPLEMENTATION_NOT_EXIST = "BPMN_SERVICE_TASK_IMPLEMENTATION_NOT_EXIST", "Service task implementation does not exist"
    BPMN_SERVICE_TASK_IMPLEMENTATION_CLASS_EMPTY = "BPMN_SERVICE_TASK_IMPLEMENTATION_CLASS_EMPTY", "Service task implementation class is empty"
    BPMN_SERVICE_TASK_IMPLEMENTATION_CLASS_NOT_FOUND = "BPMN_SERVICE_TASK_IMPLEMENTATION_CLASS_NOT_FOUND", "Service task implementation class not found"
    BPMN_SERVICE_TASK_NOT_EXTENDING_ABSTRACT_SERVICE_DELEGATE = "BPMN_SERVICE_TASK_NOT_EXTENDING_ABSTRACT_SERVICE_DELEGATE", "Service task implementation class does not extend AbstractServiceDelegate"
    BPMN_SERVICE_TASK_NO_INTERFACE_CLASS_IMPLEMENTING = "BPMN_SERVICE_TASK_NO_INTERFACE_CLASS_IMPLEMENTING", "Service task has no proper interface class implementation"
    BPMN_MESSAGE_SEND_TASK_IMPLEMENTATION_CLASS_NOT_FOUND = "BPMN_MESSAGE_SEND_TASK_IMPLEMENTATION_CLASS_NOT_FOUND", "Message send task implementation class not found"
    BPMN_MESSAGE_SEND_EVENT_IMPLEMENTATION_CLASS_NOT_FOUND = "BPMN_MESSAGE_SEND_EVENT_IMPLEMENTATION_CLASS_NOT_FOUND", "Message send event implementation class not found"
    BPMN_MESSAGE_SEND_EVENT_NOT_IMPLEMENTING_JAVA_DELEGATE = "BPMN_MESSAGE_SEND_EVENT_NOT_IMPLEMENTING_JAVA_DELEGATE", "Message send event implementation class does not implement JavaDelegate"
    BPMN_END_OR_INTERMEDIATE_THROW_EVENT_MISSING_INTERFACE = "BPMN_END_OR_INTERMEDIATE_THROW_EVENT_MISSING_INTERFACE", "End or intermediate throw event has no proper interface class implementation"
    BPMN_USER_TASK_NAME_EMPTY = "BPMN_USER_TASK_NAME_EMPTY", "User task name is empty"
    BPMN_USER_TASK_FORM_KEY_EMPTY = "BPMN_USER_TASK_FORM_KEY_EMPTY", "User task formKey is empty"
    BPMN_USER_TASK_FORM_KEY_NOT_EXTERNAL = "BPMN_USER_TASK_FORM_KEY_NOT_EXTERNAL", "User task formKey is not an external form"

    # BPMN: listeners
    BPMN_EXECUTION_LISTENER_CLASS_NOT_FOUND = "BPMN_EXECUTION_LISTENER_CLASS_NOT_FOUND", "Execution listener class not found"
    BPMN_EXECUTION_LISTENER_NOT_IMPLEMENTING_REQUIRED_INTERFACE = "BPMN_EXECUTION_LISTENER_NOT_IMPLEMENTING_REQUIRED_INTERFACE", "Execution listener class does not implement the required interface"
    BPMN_USER_TASK_LISTENER_MISSING_CLASS_ATTRIBUTE = "BPMN_USER_TASK_LISTENER_MISSING_CLASS_ATTRIBUTE", "Task listener is missing the 'class' attribute"
    BPMN_USER_TASK_LISTENER_CLASS_NOT_FOUND = "BPMN_USER_TASK_LISTENER_CLASS_NOT_FOUND", "User task listener class not found"
    BPMN_USER_TASK_LISTENER_NOT_EXTENDING_OR_IMPLEMENTING_REQUIRED_CLASS = "BPMN_USER_TASK_LISTENER_NOT_EXTENDING_OR_IMPLEMENTING_REQUIRED_CLASS", "User task listener class does not extend or implement the required type"
    BPMN_PRACTITIONER_ROLE_HAS_NO_VALUE_OR_NULL = "BPMN_PRACTITIONER_ROLE_HAS_NO_VALUE_OR_NULL", "practitionerRole input parameter has no value"
    BPMN_PRACTITIONERS_HAS_NO_VALUE_OR_NULL = "BPMN_PRACTITIONERS_HAS_NO_VALUE_OR_NULL", "practitioners input parameter has no value"

    # BPMN: events
    BPMN_EVENT_NAME_EMPTY = "BPMN_EVENT_NAME_EMPTY", "Event name is empty"
    BPMN_MESSAGE_START_EVENT_MESSAGE_NAME_EMPTY = "BPMN_MESSAGE_START_EVENT_MESSAGE_NAME_EMPTY", "Message start event message name is empty"
    BPMN_MESSAGE_INTERMEDIATE_CATCH_EVENT_NAME_EMPTY = "BPMN_MESSAGE_INTERMEDIATE_CATCH_EVENT_NAME_EMPTY", "Message intermediate catch event name is empty"
    BPMN_MESSAGE_INTERMEDIATE_CATCH_EVENT_MESSAGE_NAME_EMPTY = "BPMN_MESSAGE_INTERMEDIATE_CATCH_EVENT_MESSAGE_NAME_EMPTY", "Message intermediate catch event message name is empty"
    BPMN_MESSAGE_INTERMEDIATE_THROW_EVENT_HAS_MESSAGE = "BPMN_MESSAGE_INTERMEDIATE_THROW_EVENT_HAS_MESSAGE", "Message intermediate throw event carries a message"
    BPMN_ERROR_BOUNDARY_EVENT_NAME_EMPTY = "BPMN_ERROR_BOUNDARY_EVENT_NAME_EMPTY", "Error boundary event name is empty"
    BPMN_ERROR_BOUNDARY_EVENT_ERROR_CODE_EMPTY = "BPMN_ERROR_BOUNDARY_EVENT_ERROR_CODE_EMPTY", "Error boundary event error code is empty"
    BPMN_SIGNAL_INTERMEDIATE_THROW_EVENT_SIGNAL_EMPTY = "BPMN_SIGNAL_INTERMEDIATE_THROW_EVENT_SIGNAL_EMPTY", "Signal intermediate throw event has no signal"
    BPMN_SIGNAL_END_EVENT_SIGNAL_EMPTY = "BPMN_SIGNAL_END_EVENT_SIGNAL_EMPTY", "Signal end event has no signal"
    BPMN_TIMER_INTERMEDIATE_CATCH_EVENT_EXPRESSION_EMPTY = "BPMN_TIMER_INTERMEDIATE_CATCH_EVENT_EXPRESSION_EMPTY", "Timer intermediate catch event has no time expression"
    BPMN_END_EVENT_INSIDE_SUB_PROCESS_SHOULD_HAVE_ASYNC_AFTER_TRUE = "BPMN_END_EVENT_INSIDE_SUB_PROCESS_SHOULD_HAVE_ASYNC_AFTER_TRUE", "End event inside a sub process should have asyncAfter set to true"

    # BPMN: structure
    BPMN_SUB_PROCESS_MULTI_INSTANCE_NOT_ASYNC_BEFORE = "BPMN_SUB_PROCESS_MULTI_INSTANCE_NOT_ASYNC_BEFORE", "Multi-instance sub process is not asyncBefore"
    BPMN_EXCLUSIVE_GATEWAY_HAS_MULTIPLE_OUTGOING_FLOWS_BUT_NAME_IS_EMPTY = "BPMN_EXCLUSIVE_GATEWAY_HAS_MULTIPLE_OUTGOING_FLOWS_BUT_NAME_IS_EMPTY", "Exclusive gateway with multiple outgoing flows has no name"
    BPMN_FLOATING_ELEMENT = "BPMN_FLOATING_ELEMENT", "Element is not connected to the process flow"
    BPMN_PROCESS_ID_EMPTY = "BPMN_PROCESS_ID_EMPTY", "Process id is empty"
    BPMN_PROCESS_ID_PATTERN_MISMATCH = "BPMN_PROCESS_ID_PATTERN_MISMATCH", "Process id does not match the expected pattern"

    # BPMN: field injections
    BPMN_UNKNOWN_FIELD_INJECTION = "BPMN_UNKNOWN_FIELD_INJECTION", "Unknown field injection"
    BPMN_FIELD_INJECTION_NOT_STRING_LITERAL = "BPMN_FIELD_INJECTION_NOT_STRING_LITERAL", "Field injection is not a string literal"
    BPMN_FIELD_INJECTION_PROFILE_EMPTY = "BPMN_FIELD_INJECTION_PROFILE_EMPTY", "Profile field injection is empty"
    BPMN_FIELD_INJECTION_PROFILE_NO_VERSION_PLACEHOLDER = "BPMN_FIELD_INJECTION_PROFILE_NO_VERSION_PLACEHOLDER", "Profile field injection has no version placeholder"
    BPMN_FIELD_INJECTION_MESSAGE_VALUE_EMPTY = "BPMN_FIELD_INJECTION_MESSAGE_VALUE_EMPTY", "Message value field injection is empty"
    BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_EMPTY = "BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_EMPTY", "instantiatesCanonical field injection is empty"
    BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_NO_VERSION_PLACEHOLDER = "BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_NO_VERSION_PLACEHOLDER", "instantiatesCanonical field injection has no version placeholder"

    # FHIR: access and authorization
    MISSING_FHIR_ACCESS_TAG = "MISSING_FHIR_ACCESS_TAG", "Missing FHIR access tag"
    MISSING_READ_ACCESS_TAG = "MISSING_READ_ACCESS_TAG", "Missing read-access tag"
    NO_EXTENSION_PROCESS_AUTHORIZATION_FOUND = "NO_EXTENSION_PROCESS_AUTHORIZATION_FOUND", "No extension-process-authorization found"
    ACTIVITY_DEFINITION_ENTRY_MISSING_REQUESTER = "ACTIVITY_DEFINITION_ENTRY_MISSING_REQUESTER", "process-authorization has no requester extension"
    ACTIVITY_DEFINITION_ENTRY_MISSING_RECIPIENT = "ACTIVITY_DEFINITION_ENTRY_MISSING_RECIPIENT", "process-authorization has no recipient extension"
    ACTIVITY_DEFINITION_MISSING_PROFILE = "ACTIVITY_DEFINITION_MISSING_PROFILE", "ActivityDefinition is missing the expected profile"
    ACTIVITY_DEFINITION_PROFILE_HAS_VERSION_NUMBER = "ACTIVITY_DEFINITION_PROFILE_HAS_VERSION_NUMBER", "ActivityDefinition profile contains a version number"
    FHIR_KIND_NOT_SET_AS_TASK = "FHIR_KIND_NOT_SET_AS_TASK", "ActivityDefinition kind is not Task"

    # FHIR: Task
    FHIR_TASK_MISSING_PROFILE = "FHIR_TASK_MISSING_PROFILE", "Task is missing meta.profile"
    FHIR_TASK_MISSING_INSTANTIATES_CANONICAL = "FHIR_TASK_MISSING_INSTANTIATES_CANONICAL", "Task is missing instantiatesCanonical"
    TASK_UNKNOWN_INSTANTIATES_CANONICAL = "TASK_UNKNOWN_INSTANTIATES_CANONICAL", "Task references an unknown instantiatesCanonical"
    TASK_INSTANTIATES_CANONICAL_PLACEHOLDER = "TASK_INSTANTIATES_CANONICAL_PLACEHOLDER", "instantiatesCanonical lacks placeholders"
    FHIR_TASK_MISSING_STATUS = "FHIR_TASK_MISSING_STATUS", "Task is missing status"
    TASK_STATUS_NOT_DRAFT = "TASK_STATUS_NOT_DRAFT", "Task status is not draft"
    TASK_INTENT_NOT_ORDER = "TASK_INTENT_NOT_ORDER", "Task intent is not order"
    FHIR_TASK_MISSING_REQUESTER = "FHIR_TASK_MISSING_REQUESTER", "Task requester is missing"
    INVALID_TASK_REQUESTER_SYSTEM = "INVALID_TASK_REQUESTER_SYSTEM", "Task requester identifier system is invalid"
    FHIR_TASK_REQUESTER_ID_NO_PLACEHOLDER = "FHIR_TASK_REQUESTER_ID_NO_PLACEHOLDER", "Task requester identifier lacks the organization placeholder"
    FHIR_TASK_MISSING_RECIPIENT = "FHIR_TASK_MISSING_RECIPIENT", "Task recipient is missing"
    INVALID_TASK_RECIPIENT_SYSTEM = "INVALID_TASK_RECIPIENT_SYSTEM", "Task recipient identifier system is invalid"
    FHIR_TASK_RECIPIENT_ID_MISSING = "FHIR_TASK_RECIPIENT_ID_MISSING", "Task recipient identifier value is missing"
    FHIR_TASK_RECIPIENT_ID_NO_PLACEHOLDER = "FHIR_TASK_RECIPIENT_ID_NO_PLACEHOLDER", "Task recipient identifier lacks the organization placeholder"
    FHIR_TASK_RECIPIENT_ORGANIZATION_NO_PLACEHOLDER = "FHIR_TASK_RECIPIENT_ORGANIZATION_NO_PLACEHOLDER", "Task recipient organization lacks a placeholder"
    FHIR_TASK_DATE_NO_PLACEHOLDER = "FHIR_TASK_DATE_NO_PLACEHOLDER", "Task authoredOn lacks the date placeholder"
    FHIR_TASK_MISSING_INPUT = "FHIR_TASK_MISSING_INPUT", "Task is missing input"
    TASK_INPUT_MISSING_VALUE = "TASK_INPUT_MISSING_VALUE", "Task input has no value"
    TASK_INPUT_MISSING_SYSTEM_OR_CODE = "TASK_INPUT_MISSING_SYSTEM_OR_CODE", "Task input coding lacks system or code"
    TASK_INPUT_MISSING_MESSAGE_NAME = "TASK_INPUT_MISSING_MESSAGE_NAME", "Task has no message-name input"
    FHIR_TASK_DUPLICATE_SLICE = "FHIR_TASK_DUPLICATE_SLICE", "Task has duplicate input slices"
    FHIR_TASK_UNKNOWN_CODE = "FHIR_TASK_UNKNOWN_CODE", "Task uses an unknown code"
    FHIR_TASK_INPUT_INSTANCE_COUNT_BELOW_MIN = "FHIR_TASK_INPUT_INSTANCE_COUNT_BELOW_MIN", "Task has fewer inputs than required"
    FHIR_TASK_INPUT_INSTANCE_COUNT_EXCEEDS_MAX = "FHIR_TASK_INPUT_INSTANCE_COUNT_EXCEEDS_MAX", "Task has more inputs than allowed"
    FHIR_TASK_BUSINESS_KEY_EXISTS = "FHIR_TASK_BUSINESS_KEY_EXISTS", "Task has a business-key input"
    FHIR_TASK_BUSINESS_KEY_CHECK_SKIPPED = "FHIR_TASK_BUSINESS_KEY_CHECK_SKIPPED", "Business key check skipped"
    TASK_BUSINESS_KEY_REQUIRED_FOR_STATUS = "TASK_BUSINESS_KEY_REQUIRED_FOR_STATUS", "Task status requires a business-key input"
    FHIR_TASK_CORRELATION_KEY_EXISTS = "FHIR_TASK_CORRELATION_KEY_EXISTS", "Task has a correlation-key input"
    TASK_CORRELATION_KEY_REQUIRED_BUT_MISSING = "TASK_CORRELATION_KEY_REQUIRED_BUT_MISSING", "Task is missing a required correlation-key input"

    # FHIR: ValueSet
    FHIR_VALUE_SET_MISSING_URL = "FHIR_VALUE_SET_MISSING_URL", "ValueSet is missing url"
    FHIR_VALUE_SET_MISSING_NAME = "FHIR_VALUE_SET_MISSING_NAME", "ValueSet is missing name"
    FHIR_VALUE_SET_MISSING_DESCRIPTION = "FHIR_VALUE_SET_MISSING_DESCRIPTION", "ValueSet is missing description"
    FHIR_VALUE_SET_MISSING_COMPOSE_INCLUDE = "FHIR_VALUE_SET_MISSING_COMPOSE_INCLUDE", "ValueSet is missing compose.include"
    FHIR_VALUE_SET_MISSING_READ_ACCESS_TAG_ALL_OR_LOCAL = "FHIR_VALUE_SET_MISSING_READ_ACCESS_TAG_ALL_OR_LOCAL", "ValueSet is missing an ALL or LOCAL read-access tag"
    FHIR_VALUE_SET_VERSION_NO_PLACEHOLDER = "FHIR_VALUE_SET_VERSION_NO_PLACEHOLDER", "ValueSet version lacks the placeholder"
    FHIR_VALUE_SET_CONCEPT_MISSING_CODE = "FHIR_VALUE_SET_CONCEPT_MISSING_CODE", "ValueSet concept has no code"
    FHIR_VALUE_SET_DUPLICATE_CONCEPT_CODE = "FHIR_VALUE_SET_DUPLICATE_CONCEPT_CODE", "ValueSet repeats a concept code"
    FHIR_VALUE_SET_FALSE_URL_REFERENCED = "FHIR_VALUE_SET_FALSE_URL_REFERENCED", "ValueSet references the wrong CodeSystem url"
    FHIR_VALUE_SET_ORGANIZATION_ROLE_MISSING_VALID_CODE_VALUE = "FHIR_VALUE_SET_ORGANIZATION_ROLE_MISSING_VALID_CODE_VALUE", "ValueSet organization role has no valid code"

    # FHIR: CodeSystem
    CODE_SYSTEM_MISSING_ELEMENT = "CODE_SYSTEM_MISSING_ELEMENT", "CodeSystem is missing a required element"
    CODE_SYSTEM_MISSING_CONCEPT = "CODE_SYSTEM_MISSING_CONCEPT", "CodeSystem has no concepts"
    CODE_SYSTEM_INVALID_URL = "CODE_SYSTEM_INVALID_URL", "CodeSystem url is invalid"
    CODE_SYSTEM_INVALID_STATUS = "CODE_SYSTEM_INVALID_STATUS", "CodeSystem status is invalid"
    CODE_SYSTEM_CONCEPT_MISSING_CODE = "CODE_SYSTEM_CONCEPT_MISSING_CODE", "CodeSystem concept has no code"
    CODE_SYSTEM_CONCEPT_MISSING_DISPLAY = "CODE_SYSTEM_CONCEPT_MISSING_DISPLAY", "CodeSystem concept has no display"
    CODE_SYSTEM_VERSION_NO_PLACEHOLDER = "CODE_SYSTEM_VERSION_NO_PLACEHOLDER", "CodeSystem version lacks the placeholder"
    CODE_SYSTEM_DATE_NO_PLACEHOLDER = "CODE_SYSTEM_DATE_NO_PLACEHOLDER", "CodeSystem date lacks the placeholder"

    # FHIR: Questionnaire
    QUESTIONNAIRE_MISSING_META_PROFILE = "QUESTIONNAIRE_MISSING_META_PROFILE", "Questionnaire is missing meta.profile"
    QUESTIONNAIRE_INVALID_META_PROFILE = "QUESTIONNAIRE_INVALID_META_PROFILE", "Questionnaire meta.profile is invalid"
    QUESTIONNAIRE_INVALID_STATUS = "QUESTIONNAIRE_INVALID_STATUS", "Questionnaire status is unexpected"
    QUESTIONNAIRE_VERSION_NO_PLACEHOLDER = "QUESTIONNAIRE_VERSION_NO_PLACEHOLDER", "Questionnaire version lacks the placeholder"
    QUESTIONNAIRE_DATE_NO_PLACEHOLDER = "QUESTIONNAIRE_DATE_NO_PLACEHOLDER", "Questionnaire date lacks the placeholder"
    QUESTIONNAIRE_MISSING_ITEM = "QUESTIONNAIRE_MISSING_ITEM", "Questionnaire has no items"
    QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_LINK_ID = "QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_LINK_ID", "Questionnaire item has no linkId"
    QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_TEXT = "QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_TEXT", "Questionnaire item has no text"
    QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_TYPE = "QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_TYPE", "Questionnaire item has no type"
    QUESTIONNAIRE_DUPLICATE_LINK_ID = "QUESTIONNAIRE_DUPLICATE_LINK_ID", "Questionnaire repeats a linkId"
    QUESTIONNAIRE_UNUSUAL_LINK_ID = "QUESTIONNAIRE_UNUSUAL_LINK_ID", "Questionnaire linkId has an unusual format"
    QUESTIONNAIRE_MANDATORY_ITEM_NOT_REQUIRED = "QUESTIONNAIRE_MANDATORY_ITEM_NOT_REQUIRED", "Mandatory Questionnaire item is not required"
    QUESTIONNAIRE_MANDATORY_ITEM_INVALID_TYPE = "QUESTIONNAIRE_MANDATORY_ITEM_INVALID_TYPE", "Mandatory Questionnaire item has an invalid type"

    # FHIR: StructureDefinition
    STRUCTURE_DEFINITION_SLICE_MAX_TOO_HIGH = "STRUCTURE_DEFINITION_SLICE_MAX_TOO_HIGH", "Slice max exceeds the base max"
    STRUCTURE_DEFINITION_SLICE_MIN_SUM_ABOVE_BASE_MIN = "STRUCTURE_DEFINITION_SLICE_MIN_SUM_ABOVE_BASE_MIN", "Sum of slice min is below the base min"

    # Plugin definition
    PLUGIN_DEFINITION_MISSING = "PLUGIN_DEFINITION_MISSING", "No ProcessPluginDefinition found"
    PLUGIN_DEFINITION_BPMN_FILE_REFERENCED_BUT_NOT_FOUND = "PLUGIN_DEFINITION_BPMN_FILE_REFERENCED_BUT_NOT_FOUND", "Referenced BPMN file not found"
    PLUGIN_DEFINITION_FHIR_FILE_REFERENCED_BUT_NOT_FOUND = "PLUGIN_DEFINITION_FHIR_FILE_REFERENCED_BUT_NOT_FOUND", "Referenced FHIR file not found"
    PLUGIN_DEFINITION_BPMN_FILE_OUTSIDE_EXPECTED_ROOT = "PLUGIN_DEFINITION_BPMN_FILE_OUTSIDE_EXPECTED_ROOT", "Referenced BPMN file lies outside the resource root"
    PLUGIN_DEFINITION_FHIR_FILE_OUTSIDE_EXPECTED_ROOT = "PLUGIN_DEFINITION_FHIR_FILE_OUTSIDE_EXPECTED_ROOT", "Referenced FHIR file lies outside the resource root"
    PLUGIN_DEFINITION_RESOURCE_NOT_LOADED = "PLUGIN_DEFINITION_RESOURCE_NOT_LOADED", "Resource is not referenced by the plugin definition"


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class ValidationType(FindingType):
    """Rules evaluated in validation mode."""

    UNKNOWN = "UNKNOWN", "Unknown validation finding"
    SUCCESS = "SUCCESS", "Check passed"

    # BPMN
    BPMN_FLOATING_ELEMENT = "BPMN_FLOATING_ELEMENT", "Element is not connected to the process flow"
    BPMN_SEQUENCE_FLOW_AMBIGUOUS_NAME_IS_EMPTY = "BPMN_SEQUENCE_FLOW_AMBIGUOUS_NAME_IS_EMPTY", "Sequence flow leaving a branching source has no name"
    BPMN_END_OR_INTERMEDIATE_THROW_EVENT_MISSING_INTERFACE = "BPMN_END_OR_INTERMEDIATE_THROW_EVENT_MISSING_INTERFACE", "End or intermediate throw event has no proper interface class implementation"
    BPMN_SERVICE_TASK_NO_INTERFACE_CLASS_IMPLEMENTING = "BPMN_SERVICE_TASK_NO_INTERFACE_CLASS_IMPLEMENTING", "Service task has no proper interface class implementation"
    BPMN_SEND_TASK_NO_INTERFACE_CLASS_IMPLEMENTING = "BPMN_SEND_TASK_NO_INTERFACE_CLASS_IMPLEMENTING", "Send task has no proper interface class implementation"
    BPMN_MESSAGE_SEND_TASK_IMPLEMENTATION_CLASS_NOT_FOUND = "BPMN_MESSAGE_SEND_TASK_IMPLEMENTATION_CLASS_NOT_FOUND", "Message send task implementation class not found"
    BPMN_MESSAGE_SEND_EVENT_IMPLEMENTATION_CLASS_NOT_FOUND = "BPMN_MESSAGE_SEND_EVENT_IMPLEMENTATION_CLASS_NOT_FOUND", "Message send event implementation class not found"
    BPMN_MESSAGE_INTERMEDIATE_CATCH_EVENT_NAME_EMPTY = "BPMN_MESSAGE_INTERMEDIATE_CATCH_EVENT_NAME_EMPTY", "Message intermediate catch event name is empty"
    BPMN_MESSAGE_INTERMEDIATE_THROW_EVENT_HAS_MESSAGE = "BPMN_MESSAGE_INTERMEDIATE_THROW_EVENT_HAS_MESSAGE", "Message intermediate throw event carries a message"
    BPMN_MESSAGE_START_EVENT_NOT_FOUND_IN_ACTIVITY_DEFINITION = "BPMN_MESSAGE_START_EVENT_NOT_FOUND_IN_ACTIVITY_DEFINITION", "Message start event message name is not in any ActivityDefinition"
    BPMN_USER_TASK_LISTENER_MISSING_CLASS_ATTRIBUTE = "BPMN_USER_TASK_LISTENER_MISSING_CLASS_ATTRIBUTE", "Task listener is missing the 'class' attribute"
    BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_EMPTY = "BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_EMPTY", "instantiatesCanonical field injection is empty"
    BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_FOUND_IN_STRUCTURE_BUT_EMPTY = "BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_FOUND_IN_STRUCTURE_BUT_EMPTY", "instantiatesCanonical is empty in the StructureDefinition"
    BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_NOT_IN_ACTIVITY_DEFINITION = "BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_NOT_IN_ACTIVITY_DEFINITION", "instantiatesCanonical is not in any ActivityDefinition"
    BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_NOT_IN_STRUCTURE_DEFINITION = "BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_NOT_IN_STRUCTURE_DEFINITION", "instantiatesCanonical is not in any StructureDefinition"
    BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_NO_VERSION_PLACEHOLDER = "BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_NO_VERSION_PLACEHOLDER", "instantiatesCanonical field injection has no version placeholder"
    BPMN_FIELD_INJECTION_MESSAGE_VALUE_FOUND_IN_STRUCTURE_BUT_EMPTY = "BPMN_FIELD_INJECTION_MESSAGE_VALUE_FOUND_IN_STRUCTURE_BUT_EMPTY", "Message value is empty in the StructureDefinition"
    BPMN_FIELD_INJECTION_MESSAGE_VALUE_NOT_IN_ACTIVITY_DEFINITION = "BPMN_FIELD_INJECTION_MESSAGE_VALUE_NOT_IN_ACTIVITY_DEFINITION", "Message value is not in any ActivityDefinition"
    BPMN_FIELD_INJECTION_MESSAGE_VALUE_NOT_IN_PROFILE_VALUE = "BPMN_FIELD_INJECTION_MESSAGE_VALUE_NOT_IN_PROFILE_VALUE", "Message value is not in the profile value"
    BPMN_FIELD_INJECTION_MESSAGE_VALUE_NOT_IN_STRUCTURE_DEFINITION = "BPMN_FIELD_INJECTION_MESSAGE_VALUE_NOT_IN_STRUCTURE_DEFINITION", "Message value is not in any StructureDefinition"
    BPMN_FIELD_INJECTION_MISSING_STRUCTURE_DEFINITION_FOR_PROFILE = "BPMN_FIELD_INJECTION_MISSING_STRUCTURE_DEFINITION_FOR_PROFILE", "No StructureDefinition for the injected profile"
    BPMN_FIELD_INJECTION_PROFILE_NO_VERSION_PLACEHOLDER = "BPMN_FIELD_INJECTION_PROFILE_NO_VERSION_PLACEHOLDER", "Profile field injection has no version placeholder"

    # FHIR: access and authorization
    MISSING_FHIR_ACCESS_TAG = "MISSING_FHIR_ACCESS_TAG", "Missing FHIR access tag"
    NO_EXTENSION_PROCESS_AUTHORIZATION_FOUND = "NO_EXTENSION_PROCESS_AUTHORIZATION_FOUND", "No extension-process-authorization found"
    ACTIVITY_DEFINITION_ENTRY_MISSING_REQUESTER = "ACTIVITY_DEFINITION_ENTRY_MISSING_REQUESTER", "process-authorization has no requester extension"
    ACTIVITY_DEFINITION_ENTRY_MISSING_RECIPIENT = "ACTIVITY_DEFINITION_ENTRY_MISSING_RECIPIENT", "process-authorization has no recipient extension"
    FHIR_KIND_NOT_SET_AS_TASK = "FHIR_KIND_NOT_SET_AS_TASK", "ActivityDefinition kind is not Task"

    # FHIR: Task
    FHIR_TASK_MISSING_ID = "FHIR_TASK_MISSING_ID", "Task is missing id"
    FHIR_TASK_MISSING_PROFILE = "FHIR_TASK_MISSING_PROFILE", "Task is missing meta.profile"
    FHIR_TASK_MISSING_INSTANTIATES_CANONICAL = "FHIR_TASK_MISSING_INSTANTIATES_CANONICAL", "Task is missing instantiatesCanonical"
    TASK_UNKNOWN_INSTANTIATES_CANONICAL = "TASK_UNKNOWN_INSTANTIATES_CANONICAL", "Task references an unknown instantiatesCanonical"
    TASK_INSTANTIATES_CANONICAL_PLACEHOLDER = "TASK_INSTANTIATES_CANONICAL_PLACEHOLDER", "instantiatesCanonical lacks placeholders"
    TASK_STATUS_NOT_DRAFT = "TASK_STATUS_NOT_DRAFT", "Task status is not draft"
    TASK_INTENT_NOT_ORDER = "TASK_INTENT_NOT_ORDER", "Task intent is not order"
    FHIR_TASK_MISSING_REQUESTER = "FHIR_TASK_MISSING_REQUESTER", "Task requester is missing"
    INVALID_TASK_REQUESTER_SYSTEM = "INVALID_TASK_REQUESTER_SYSTEM", "Task requester identifier system is invalid"
    FHIR_TASK_REQUESTER_ID_MISSING = "FHIR_TASK_REQUESTER_ID_MISSING", "Task requester identifier value is missing"
    FHIR_TASK_REQUESTER_ID_NO_PLACEHOLDER = "FHIR_TASK_REQUESTER_ID_NO_PLACEHOLDER", "Task requester identifier lacks the organization placeholder"
    FHIR_TASK_REQUESTER_ORGANIZATION_NO_PLACEHOLDER = "FHIR_TASK_REQUESTER_ORGANIZATION_NO_PLACEHOLDER", "Task requester organization lacks a placeholder"
    FHIR_TASK_REQUESTER_NOT_AUTHORIZED = "FHIR_TASK_REQUESTER_NOT_AUTHORIZED", "Task requester is not authorized"
    FHIR_TASK_MISSING_RECIPIENT = "FHIR_TASK_MISSING_RECIPIENT", "Task recipient is missing"
    INVALID_TASK_RECIPIENT_SYSTEM = "INVALID_TASK_RECIPIENT_SYSTEM", "Task recipient identifier system is invalid"
    FHIR_TASK_RECIPIENT_ID_MISSING = "FHIR_TASK_RECIPIENT_ID_MISSING", "Task recipient identifier value is missing"
    FHIR_TASK_RECIPIENT_ID_NO_PLACEHOLDER = "FHIR_TASK_RECIPIENT_ID_NO_PLACEHOLDER", "Task recipient identifier lacks the organization placeholder"
    FHIR_TASK_RECIPIENT_ORGANIZATION_NO_PLACEHOLDER = "FHIR_TASK_RECIPIENT_ORGANIZATION_NO_PLACEHOLDER", "Task recipient organization lacks a placeholder"
    FHIR_TASK_DATE_NO_PLACEHOLDER = "FHIR_TASK_DATE_NO_PLACEHOLDER", "Task authoredOn lacks the date placeholder"
    FHIR_TASK_MISSING_INPUT = "FHIR_TASK_MISSING_INPUT", "Task is missing input"
    TASK_INPUT_MISSING_VALUE = "TASK_INPUT_MISSING_VALUE", "Task input has no value"
    TASK_INPUT_MISSING_SYSTEM_OR_CODE = "TASK_INPUT_MISSING_SYSTEM_OR_CODE", "Task input coding lacks system or code"
    TASK_INPUT_MISSING_MESSAGE_NAME = "TASK_INPUT_MISSING_MESSAGE_NAME", "Task has no message-name input"
    FHIR_TASK_DUPLICATE_SLICE = "FHIR_TASK_DUPLICATE_SLICE", "Task has duplicate input slices"
    FHIR_TASK_UNKNOWN_CODE = "FHIR_TASK_UNKNOWN_CODE", "Task uses an unknown code"
    FHIR_TASK_BUSINESS_KEY_EXISTS = "FHIR_TASK_BUSINESS_KEY_EXISTS", "Task has a business-key input"
    FHIR_TASK_BUSINESS_KEY_CHECK_SKIPPED = "FHIR_TASK_BUSINESS_KEY_CHECK_SKIPPED", "Business key check skipped"
    TASK_BUSINESS_KEY_REQUIRED_FOR_STATUS = "TASK_BUSINESS_KEY_REQUIRED_FOR_STATUS", "Task status requires a business-key input"
    FHIR_TASK_CORRELATION_KEY_EXISTS = "FHIR_TASK_CORRELATION_KEY_EXISTS", "Task has a correlation-key input"
    TASK_CORRELATION_KEY_REQUIRED_BUT_MISSING = "TASK_CORRELATION_KEY_REQUIRED_BUT_MISSING", "Task is missing a required correlation-key input"
    FHIR_TASK_MISSING_ERROR_OUTPUT = "FHIR_TASK_MISSING_ERROR_OUTPUT", "Failed Task has no error output"
    TASK_OUTPUT_MISSING_CODE = "TASK_OUTPUT_MISSING_CODE", "Task output coding has no code"
    TASK_OUTPUT_MISSING_VALUE = "TASK_OUTPUT_MISSING_VALUE", "Task output has no value"

    # FHIR: ValueSet
    FHIR_VALUE_SET_MISSING_URL = "FHIR_VALUE_SET_MISSING_URL", "ValueSet is missing url"
    FHIR_VALUE_SET_MISSING_NAME = "FHIR_VALUE_SET_MISSING_NAME", "ValueSet is missing name"
    FHIR_VALUE_SET_MISSING_TITLE = "FHIR_VALUE_SET_MISSING_TITLE", "ValueSet is missing title"
    FHIR_VALUE_SET_MISSING_PUBLISHER = "FHIR_VALUE_SET_MISSING_PUBLISHER", "ValueSet is missing publisher"
    FHIR_VALUE_SET_MISSING_DESCRIPTION = "FHIR_VALUE_SET_MISSING_DESCRIPTION", "ValueSet is missing description"
    FHIR_VALUE_SET_MISSING_COMPOSE_INCLUDE = "FHIR_VALUE_SET_MISSING_COMPOSE_INCLUDE", "ValueSet is missing compose.include"
    FHIR_VALUE_SET_INCLUDE_MISSING_SYSTEM = "FHIR_VALUE_SET_INCLUDE_MISSING_SYSTEM", "ValueSet include has no system"
    FHIR_VALUE_SET_MISSING_READ_ACCESS_TAG = "FHIR_VALUE_SET_MISSING_READ_ACCESS_TAG", "ValueSet is missing a read-access tag"
    FHIR_VALUE_SET_VERSION_NO_PLACEHOLDER = "FHIR_VALUE_SET_VERSION_NO_PLACEHOLDER", "ValueSet version lacks the placeholder"
    FHIR_VALUE_SET_DATE_NO_PLACEHOLDER = "FHIR_VALUE_SET_DATE_NO_PLACEHOLDER", "ValueSet date lacks the placeholder"
    FHIR_VALUE_SET_INCLUDE_VERSION_PLACEHOLDER = "FHIR_VALUE_SET_INCLUDE_VERSION_PLACEHOLDER", "ValueSet include version lacks the placeholder"
    FHIR_VALUE_SET_CONCEPT_MISSING_CODE = "FHIR_VALUE_SET_CONCEPT_MISSING_CODE", "ValueSet concept has no code"
    FHIR_VALUE_SET_DUPLICATE_CONCEPT_CODE = "FHIR_VALUE_SET_DUPLICATE_CONCEPT_CODE", "ValueSet repeats a concept code"
    FHIR_VALUE_SET_FALSE_URL_REFERENCED = "FHIR_VALUE_SET_FALSE_URL_REFERENCED", "ValueSet references the wrong CodeSystem url"
    FHIR_VALUE_SET_UNKNOWN_CODE = "FHIR_VALUE_SET_UNKNOWN_CODE", "ValueSet uses an unknown code"
    FHIR_VALUE_SET_ORGANIZATION_ROLE_MISSING_VALID_CODE_VALUE = "FHIR_VALUE_SET_ORGANIZATION_ROLE_MISSING_VALID_CODE_VALUE", "ValueSet organization role has no valid code"

    # FHIR: CodeSystem
    CODE_SYSTEM_MISSING_ELEMENT = "CODE_SYSTEM_MISSING_ELEMENT", "CodeSystem is missing a required element"
    CODE_SYSTEM_MISSING_CONCEPT = "CODE_SYSTEM_MISSING_CONCEPT", "CodeSystem has no concepts"
    CODE_SYSTEM_MISSING_READ_ACCESS_TAG = "CODE_SYSTEM_MISSING_READ_ACCESS_TAG", "CodeSystem is missing a read-access tag"
    CODE_SYSTEM_INVALID_URL = "CODE_SYSTEM_INVALID_URL", "CodeSystem url is invalid"
    CODE_SYSTEM_INVALID_STATUS = "CODE_SYSTEM_INVALID_STATUS", "CodeSystem status is invalid"
    CODE_SYSTEM_CONCEPT_MISSING_DISPLAY = "CODE_SYSTEM_CONCEPT_MISSING_DISPLAY", "CodeSystem concept has no display"
    CODE_SYSTEM_VERSION_NO_PLACEHOLDER = "CODE_SYSTEM_VERSION_NO_PLACEHOLDER", "CodeSystem version lacks the placeholder"
    CODE_SYSTEM_DATE_NO_PLACEHOLDER = "CODE_SYSTEM_DATE_NO_PLACEHOLDER", "CodeSystem date lacks the placeholder"

    # FHIR: Questionnaire
    QUESTIONNAIRE_MISSING_META_PROFILE = "QUESTIONNAIRE_MISSING_META_PROFILE", "Questionnaire is missing meta.profile"
    QUESTIONNAIRE_MISSING_READ_ACCESS_TAG = "QUESTIONNAIRE_MISSING_READ_ACCESS_TAG", "Questionnaire is missing a read-access tag"
    QUESTIONNAIRE_INVALID_URL = "QUESTIONNAIRE_INVALID_URL", "Questionnaire url is invalid"
    QUESTIONNAIRE_INVALID_STATUS = "QUESTIONNAIRE_INVALID_STATUS", "Questionnaire status is unexpected"
    QUESTIONNAIRE_VERSION_NO_PLACEHOLDER = "QUESTIONNAIRE_VERSION_NO_PLACEHOLDER", "Questionnaire version lacks the placeholder"
    QUESTIONNAIRE_DATE_NO_PLACEHOLDER = "QUESTIONNAIRE_DATE_NO_PLACEHOLDER", "Questionnaire date lacks the placeholder"
    QUESTIONNAIRE_MISSING_ITEM = "QUESTIONNAIRE_MISSING_ITEM", "Questionnaire has no items"
    QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_LINK_ID = "QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_LINK_ID", "Questionnaire item has no linkId"
    QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_TEXT = "QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_TEXT", "Questionnaire item has no text"
    QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_TYPE = "QUESTIONNAIRE_ITEM_MISSING_ATTRIBUTES_TYPE", "Questionnaire item has no type"
    QUESTIONNAIRE_DUPLICATE_LINK_ID = "QUESTIONNAIRE_DUPLICATE_LINK_ID", "Questionnaire repeats a linkId"
    QUESTIONNAIRE_UNUSUAL_LINK_ID = "QUESTIONNAIRE_UNUSUAL_LINK_ID", "Questionnaire linkId has an unusual format"
    QUESTIONNAIRE_MANDATORY_ITEM_NOT_REQUIRED = "QUESTIONNAIRE_MANDATORY_ITEM_NOT_REQUIRED", "Mandatory Questionnaire item is not required"
    QUESTIONNAIRE_MANDATORY_ITEM_INVALID_TYPE = "QUESTIONNAIRE_MANDATORY_ITEM_INVALID_TYPE", "Mandatory Questionnaire item has an invalid type"

    # FHIR: StructureDefinition
    STRUCTURE_DEFINITION_SLICE_MAX_TOO_HIGH = "STRUCTURE_DEFINITION_SLICE_MAX_TOO_HIGH", "Slice max exceeds the base max"
    STRUCTURE_DEFINITION_SLICE_MIN_TOO_LOW = "STRUCTURE_DEFINITION_SLICE_MIN_TOO_LOW", "Sum of slice min is below the base min"
    STRUCTURE_DEFINITION_SLICE_MIN_SUM_ABOVE_BASE_MIN = "STRUCTURE_DEFINITION_SLICE_MIN_SUM_ABOVE_BASE_MIN", "Sum of slice min exceeds the base min"

    # Plugin definition
    PLUGIN_DEFINITION_BPMN_FILE_REFERENCED_BUT_NOT_FOUND = "PLUGIN_DEFINITION_BPMN_FILE_REFERENCED_BUT_NOT_FOUND", "Referenced BPMN file not found"
    PLUGIN_DEFINITION_FHIR_FILE_REFERENCED_BUT_NOT_FOUND = "PLUGIN_DEFINITION_FHIR_FILE_REFERENCED_BUT_NOT_FOUND", "Referenced FHIR file not found"
    PLUGIN_DEFINITION_BPMN_FILE_OUTSIDE_EXPECTED_ROOT = "PLUGIN_DEFINITION_BPMN_FILE_OUTSIDE_EXPECTED_ROOT", "Referenced BPMN file lies outside the resource root"
    PLUGIN_DEFINITION_FHIR_FILE_OUTSIDE_EXPECTED_ROOT = "PLUGIN_DEFINITION_FHIR_FILE_OUTSIDE_EXPECTED_ROOT", "Referenced FHIR file lies outside the resource root"
    PLUGIN_DEFINITION_RESOURCE_NOT_LOADED = "PLUGIN_DEFINITION_RESOURCE_NOT_LOADED", "Resource is not referenced by the plugin definition"
