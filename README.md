# wtui

Building blocks for a terminal interface that manages task worktrees. There
is a task list, a services list for the selected task and a scrolling output
log. Each panel keeps its own state. Its `update(msg)` method takes a
`KeyMsg` and returns the follow-up message for the host application to
dispatch, or `None`. Its `view()` method renders the panel as a string with
ANSI colours inside a rounded border.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Panels

- `wtui.tasks.TasksPanel` lists tasks. Each task is shown with its service
  count.
  - Navigation: `j`/`k` (or `down`/`up`) move the cursor and return a
    `TaskSelectionChangedMsg`. `g`/`G` jump to the first or last task. `h`/`l`
    change page. `f` starts filtering by task id. `esc` leaves a filter.
  - Actions on the selected task: `enter` returns `FocusServicesMsg`.
    `c` returns `OpenCloneDialogMsg`. `d` or `delete` returns
    `OpenRemoveDialogMsg`. `S` returns `OpenSyncStrategyDialogMsg` and `P`
    returns `PushTaskMsg`. `R` returns `RiderTaskMsg` and `C` returns
    `CodeWorkspaceTaskMsg`.
  - Other keys: `i` returns `OpenInitDialogMsg` and `,` returns
    `OpenConfigModalMsg`.
- `wtui.services.ServicesPanel` lists the services of one task, set with
  `set_services(task_id, services)`. Each service is drawn on three lines:
  name with a clean/dirty/stale mark, branch with base branch and
  ahead/behind counts, and the last two components of its worktree path.
  - Navigation: `j`/`k` move the cursor, `h`/`l` change page and `f` starts
    filtering by name. `esc` leaves a filter; outside a filter it returns
    `FocusTasksMsg`.
  - Keys that return a message: `a` returns `OpenAddServiceMsg` with the
    existing service names. `d` returns `OpenRemoveServiceDialogMsg`. `p`
    returns `PushServiceMsg` and `s` returns
    `OpenSyncServiceStrategyDialogMsg`. `ctrl+s`/`ctrl+u` return
    `OpenStashDialogMsg` to stash or to pop.
  - Lazygit: after `set_lazygit_available(True)`, `g` returns
    `OpenLazygitServiceMsg` for the selected service. In that mode `p`, `s`,
    `ctrl+s` and `ctrl+u` do nothing.
- `wtui.output.OutputPanel` is a scrolling log. `append_line(line)` adds a
  line with a `> ` prefix and scrolls to it. When the panel is focused, the
  keys `j`/`k`, `g`/`G`, `pgup`/`pgdown` and `ctrl+u`/`ctrl+d` scroll it, and
  `esc` returns `FocusTasksMsg`. `scroll_up(n)` and `scroll_down(n)` scroll
  regardless of focus.

All panels have `set_size(width, height)` and `set_focused(focused)`.

`wtui.messages` holds the message classes, as frozen dataclasses, and the
`Task`, `Service` and `KeyMsg` records.

## Example

```python
from wtui.messages import KeyMsg, Task
from wtui.tasks import TasksPanel

panel = TasksPanel(40, 20)
panel.set_tasks([Task(id="IN-001", dir="/tmp/.tasks/IN-001")])
panel.set_focused(True)

follow_up = panel.update(KeyMsg("enter"))
print(follow_up)          # FocusServicesMsg(task_id='IN-001')
print(panel.view())
```

## Helpers

- `wtui.theme` has the colour constants, `Style` (bold, colours, padding,
  `render(text)`) and `new_styles()` for the header and footer styles. It
  also has `strip_ansi(text)` and `border_box(content, width, height, color)`.
- `wtui.widgets` has `ListModel`, a paginated list with fuzzy filtering and
  a cursor, and `Viewport`, a scrollable window over lines. It also has the
  layout helpers `inner_dimensions`, `panel_border_color` and
  `truncate_path`.

## What this package does not do

It only holds the panels and their state. It has no command to start, no
loop that reads the keyboard or draws to the terminal, and no header, footer
or dialogs. It does not run git, lazygit or editors, and it does not find,
create or remove tasks and worktrees. The messages the panels return must be
handled by the application that hosts them.