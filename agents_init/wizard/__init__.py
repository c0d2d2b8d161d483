"""agents-init wizard -- asks the questions and returns validated answers.

Quick usage::

    from agents_init.wizard import Prompter, PromptSequencer

    answers = PromptSequencer(Prompter()).run()
    answers.project.project_name
"""

from agents_init.wizard.prompts import Prompter, RequiredPrompt, split_list, validate_required
from agents_init.wizard.sequencer import PromptSequencer, WizardAnswers

__all__ = [
    "Prompter",
    "PromptSequencer",
    "RequiredPrompt",
    "WizardAnswers",
    "split_list",
    "validate_required",
]
