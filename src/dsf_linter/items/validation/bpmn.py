"""Validation findings about BPMN process models.

Field injection rules cross-check the values injected into message send
tasks and events against the plugin's ActivityDefinitions and
StructureDefinitions.
"""

from __future__ import annotations

from dsf_linter.items.common import (
    ClassReferenceFinding,
    FloatingElementFinding,
    MessageNameFinding,
    RawValueFinding,
)
from dsf_linter.model.finding_type import ValidationType
from dsf_linter.model.item import BpmnValidationItem
from dsf_linter.model.severity import ValidationSeverity

ERROR = ValidationSeverity.ERROR
WARN = ValidationSeverity.WARN


class BpmnElementValidationItemSuccess(BpmnValidationItem):
    finding_type = ValidationType.SUCCESS
    default_severity = ValidationSeverity.SUCCESS
    default_message = "BPMN element validation passed"


class BpmnFloatingElementValidationItem(FloatingElementFinding, BpmnValidationItem):
    finding_type = ValidationType.BPMN_FLOATING_ELEMENT
    default_severity = WARN
    default_message = "BPMN flow element issue ({floating_element_type})"


class BpmnSequenceFlowOriginatesFromSourceWithMultipleOutgoingAndNameIsEmptyValidationItem(BpmnValidationItem):
    finding_type = ValidationType.BPMN_SEQUENCE_FLOW_AMBIGUOUS_NAME_IS_EMPTY
    default_severity = WARN
    default_message = "Sequence flow originates from a non-floating source with multiple outgoing flows and name is empty."


# ---------------------------------------------------------------------------
# Implementation classes
# ---------------------------------------------------------------------------


class BpmnEndOrIntermediateThrowEventMissingInterfaceValidationItem(ClassReferenceFinding, BpmnValidationItem):
    finding_type = ValidationType.BPMN_END_OR_INTERMEDIATE_THROW_EVENT_MISSING_INTERFACE
    default_severity = ERROR
    default_message = "End event has no proper interface class implementation: {class_name}"


class BpmnServiceTaskNoInterfaceClassImplementingValidationItem(ClassReferenceFinding, BpmnValidationItem):
    finding_type = ValidationType.BPMN_SERVICE_TASK_NO_INTERFACE_CLASS_IMPLEMENTING
    default_severity = ERROR
    default_message = "Service task has no proper interface class implementation: {class_name}"


class BpmnSendTaskNoInterfaceClassImplementingValidationItem(ClassReferenceFinding, BpmnValidationItem):
    finding_type = ValidationType.BPMN_SEND_TASK_NO_INTERFACE_CLASS_IMPLEMENTING
    default_severity = ERROR
    default_message = "Send task has no proper interface class implementation: {class_name}"


class BpmnMessageSendTaskImplementationClassNotFoundValidationItem(ClassReferenceFinding, BpmnValidationItem):
    finding_type = ValidationType.BPMN_MESSAGE_SEND_TASK_IMPLEMENTATION_CLASS_NOT_FOUND
    default_severity = ERROR
    default_message = "Message send task implementation class not found: {class_name}"


class BpmnMessageSendEventImplementationClassNotFoundValidationItem(ClassReferenceFinding, BpmnValidationItem):
    finding_type = ValidationType.BPMN_MESSAGE_SEND_EVENT_IMPLEMENTATION_CLASS_NOT_FOUND
    default_severity = ERROR
    default_message = "Message send event implementation class not found: {class_name}"


# ---------------------------------------------------------------------------
# Events and listeners
# ---------------------------------------------------------------------------


class BpmnMessageIntermediateCatchEventNameEmptyValidationItem(BpmnValidationItem):
    finding_type = ValidationType.BPMN_MESSAGE_INTERMEDIATE_CATCH_EVENT_NAME_EMPTY
    default_severity = WARN
    default_message = "Message intermediate catch event name is empty"


class BpmnMessageIntermediateThrowEventHasMessageValidationItem(MessageNameFinding, BpmnValidationItem):
    finding_type = ValidationType.BPMN_MESSAGE_INTERMEDIATE_THROW_EVENT_HAS_MESSAGE
    default_severity = WARN
    default_message = "Message Intermediate Throw Event has a message with name: {message_name}"


class BpmnMessageStartEventMessageNameNotPresentInActivityDefinitionValidationItem(MessageNameFinding, BpmnValidationItem):
    finding_type = ValidationType.BPMN_MESSAGE_START_EVENT_NOT_FOUND_IN_ACTIVITY_DEFINITION
    default_severity = ERROR
    default_message = "Message start event message name '{message_name}' is not present in any ActivityDefinition"


class BpmnUserTaskListenerMissingClassAttributeValidationItem(BpmnValidationItem):
    finding_type = ValidationType.BPMN_USER_TASK_LISTENER_MISSING_CLASS_ATTRIBUTE
    default_severity = WARN
    default_message = "TaskListener is missing the 'class' attribute, class-based validation skipped"


# ---------------------------------------------------------------------------
# Field injections
# ---------------------------------------------------------------------------


class BpmnFieldInjectionInstantiatesCanonicalEmptyValidationItem(BpmnValidationItem):
    finding_type = ValidationType.BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_EMPTY
    default_severity = ERROR
    default_message = "instantiatesCanonical field injection is empty"


class BpmnFieldInjectionInstantiatesCanonicalFoundInStructureButEmptyValidationItem(BpmnValidationItem):
    finding_type = ValidationType.BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_FOUND_IN_STRUCTURE_BUT_EMPTY
    default_severity = ERROR
    default_message = "instantiatesCanonical field injection found in StructureDefinition but is empty"


class BpmnFieldInjectionInstantiatesCanonicalNotInActivityDefinitionValidationItem(BpmnValidationItem):
    finding_type = ValidationType.BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_NOT_IN_ACTIVITY_DEFINITION
    default_severity = WARN
    default_message = "instantiatesCanonical field injection is not found in any ActivityDefinition"


class BpmnFieldInjectionInstantiatesCanonicalNotPresentInStructureDefinitionValidationItem(BpmnValidationItem):
    finding_type = ValidationType.BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_NOT_IN_STRUCTURE_DEFINITION
    default_severity = ERROR
    default_message = "instantiatesCanonical field injection is not found in any StructureDefinition"


class BpmnFieldInjectionInstantiatesCanonicalNoVersionPlaceholderValidationItem(BpmnValidationItem):
    finding_type = ValidationType.BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_NO_VERSION_PLACEHOLDER
    default_severity = WARN
    default_message = "instantiatesCanonical field injection does not contain a version placeholder"


class BpmnFieldInjectionMessageValueFoundInStructureButEmptyValidationItem(BpmnValidationItem):
    finding_type = ValidationType.BPMN_FIELD_INJECTION_MESSAGE_VALUE_FOUND_IN_STRUCTURE_BUT_EMPTY
    default_severity = ERROR
    default_message = "Message value in field injection found in StructureDefinition but is empty"


class BpmnFieldInjectionMessageValueNotPresentInActivityDefinitionValidationItem(BpmnValidationItem):
    finding_type = ValidationType.BPMN_FIELD_INJECTION_MESSAGE_VALUE_NOT_IN_ACTIVITY_DEFINITION
    default_severity = ERROR
    default_message = "The message value is not present in any ActivityDefinition"


class BpmnFieldInjectionMessageValueNotPresentInProfileValueValidationItem(BpmnValidationItem):
    finding_type = ValidationType.BPMN_FIELD_INJECTION_MESSAGE_VALUE_NOT_IN_PROFILE_VALUE
    default_severity = ERROR
    default_message = "The message value is not present in the profile value"


class BpmnFieldInjectionMessageValueNotPresentInStructureDefinitionValidationItem(BpmnValidationItem):
    finding_type = ValidationType.BPMN_FIELD_INJECTION_MESSAGE_VALUE_NOT_IN_STRUCTURE_DEFINITION
    default_severity = ERROR
    default_message = "Message value in field injection is not present in any StructureDefinition"


class BpmnFieldInjectionMissingStructureDefinitionForProfileValidationItem(BpmnValidationItem):
    finding_type = ValidationType.BPMN_FIELD_INJECTION_MISSING_STRUCTURE_DEFINITION_FOR_PROFILE
    default_severity = WARN
    default_message = "Missing StructureDefinition for profile"


class BpmnFieldInjectionProfileNoVersionPlaceholderValidationItem(RawValueFinding, BpmnValidationItem):
    finding_type = ValidationType.BPMN_FIELD_INJECTION_PROFILE_NO_VERSION_PLACEHOLDER
    default_severity = WARN
    default_message = "Profile field injection does not contain a version placeholder: {raw_value}"
