"""Built-in action templates.

Commands target ``cmd.exe`` batch files. ``{TOOLS_PATH}`` points at the folder
holding the optional helper executables (NirCmd, QRes, MultiMonitorTool).
"""

from script_builder.domain.actions import ActionTemplate

CATALOG_VERSION = "2024.1"

_NIRCMD = '"{TOOLS_PATH}\\nircmd.exe"'
_QRES = '"{TOOLS_PATH}\\qres.exe"'
_MULTIMONITOR = '"{TOOLS_PATH}\\MultiMonitorTool.exe"'


def _with_tool(tool: str, arguments: str, otherwise: str) -> str:
    return f"if exist {tool} ({tool} {arguments}) else ({otherwise})"


AUDIO_ACTIONS = (
    ActionTemplate(
        name="Set Audio Device",
        category="Audio",
        command=(
            "powershell.exe -command \"try { $device = Get-AudioDevice -List | Where-Object { $_.ID -eq '{audio_device_id}' }; "
            "if($device) { Set-AudioDevice -ID $device.ID } } catch { Write-Host 'AudioDeviceCmdlets not available, using alternative method'; "
            "$devices = Get-WmiObject -Class Win32_SoundDevice; $targetDevice = $devices | Where-Object { $_.DeviceID -eq '{audio_device_id}' }; "
            "if($targetDevice) { $targetDevice.SetAsDefault() } }\""
        ),
        description="Set specific audio device as default",
        variables=("audio_device_id",),
    ),
    ActionTemplate(
        name="Set Volume",
        category="Audio",
        command=(
            "powershell.exe -command \"try { Set-AudioDevice -PlaybackVolume {volume} } "
            "catch { (New-Object -comObject VolumeControl.Application).Volume = {volume} }\""
        ),
        description="Set system volume (0-100)",
        variables=("volume",),
    ),
    ActionTemplate(
        name="Set Audio Device Volume",
        category="Audio",
        command=(
            "powershell.exe -command \"try { $device = Get-AudioDevice -List | Where-Object { $_.ID -eq '{audio_device_id}' }; "
            "if($device) { Set-AudioDevice -ID $device.ID -PlaybackVolume {volume} } } "
            "catch { Write-Host 'AudioDeviceCmdlets not available' }\""
        ),
        description="Set volume for specific audio device",
        variables=("audio_device_id", "volume"),
    ),
    ActionTemplate(
        name="Mute Audio",
        category="Audio",
        command=(
            "powershell.exe -command \"try { Set-AudioDevice -PlaybackMute $true } "
            "catch { (New-Object -comObject VolumeControl.Application).Mute = $true }\""
        ),
        description="Mute system audio",
    ),
    ActionTemplate(
        name="Unmute Audio",
        category="Audio",
        command=(
            "powershell.exe -command \"try { Set-AudioDevice -PlaybackMute $false } "
            "catch { (New-Object -comObject VolumeControl.Application).Mute = $false }\""
        ),
        description="Unmute system audio",
    ),
    ActionTemplate(
        name="Set Volume (NirCmd)",
        category="Audio",
        command=_with_tool(_NIRCMD, "setsysvolume {volume_level}", "echo NirCmd not found in Tools folder"),
        description="Set system volume using NirCmd (0-65535)",
        variables=("volume_level",),
    ),
    ActionTemplate(
        name="Mute Audio (NirCmd)",
        category="Audio",
        command=_with_tool(_NIRCMD, "mutesysvolume 1", "echo NirCmd not found in Tools folder"),
        description="Mute system audio using NirCmd",
    ),
    ActionTemplate(
        name="Unmute Audio (NirCmd)",
        category="Audio",
        command=_with_tool(_NIRCMD, "mutesysvolume 0", "echo NirCmd not found in Tools folder"),
        description="Unmute system audio using NirCmd",
    ),
)

DISPLAY_ACTIONS = (
    ActionTemplate(
        name="Change Resolution (QRes)",
        category="Display",
        command=_with_tool(_QRES, "/x {width} /y {height}", "echo QRes not found in Tools folder"),
        description="Change resolution using QRes tool",
        variables=("width", "height"),
    ),
    ActionTemplate(
        name="Change Resolution (NirCmd)",
        category="Display",
        command=_with_tool(_NIRCMD, "setdisplay {width} {height} 32", "echo NirCmd not found in Tools folder"),
        description="Change resolution using NirCmd tool",
        variables=("width", "height"),
    ),
    ActionTemplate(
        name="Set Display as Primary",
        category="Display",
        command=(
            "powershell.exe -command \"Add-Type -AssemblyName System.Windows.Forms; "
            "Write-Host 'Setting primary display requires external tools or registry modifications for device {display_device_id}'\""
        ),
        description="Set specific display as primary (requires external tools)",
        variables=("display_device_id",),
    ),
    ActionTemplate(
        name="Display Control Info",
        category="Display",
        command=(
            "powershell.exe -command \"Write-Host 'Display Control for: {display_device_id}'; "
            "Write-Host 'Note: Display enable/disable requires:'; Write-Host '1. Administrator privileges, OR'; "
            "Write-Host '2. External tools like DisplayChanger, MultiMonitorTool, or nircmd'; "
            "Write-Host '3. Manual Windows Display Settings (Win+P)'; "
            "Write-Host 'Alternative: Use Turn Off All Displays or Lock Workstation'\""
        ),
        description="Show display control information and alternatives",
        variables=("display_device_id",),
    ),
    ActionTemplate(
        name="Open Display Settings",
        category="Display",
        command="ms-settings:display",
        description="Open Windows Display Settings for manual configuration",
    ),
    ActionTemplate(
        name="Turn Off Displays (NirCmd)",
        category="Display",
        command=_with_tool(
            _NIRCMD,
            "monitor off",
            "powershell.exe -command \"(Add-Type '[DllImport(\\\"user32.dll\\\")]public static extern int "
            "SendMessage(int hWnd,int hMsg,int wParam,int lParam);' -Name a -Pas)::SendMessage(-1,0x0112,0xF170,2)\"",
        ),
        description="Turn off all displays using NirCmd or fallback method",
    ),
    ActionTemplate(
        name="Turn On Displays (NirCmd)",
        category="Display",
        command=_with_tool(
            _NIRCMD, "monitor on", "echo NirCmd not found in Tools folder - move mouse to wake displays"
        ),
        description="Turn on all displays using NirCmd",
    ),
    ActionTemplate(
        name="Lock Workstation",
        category="Display",
        command="rundll32.exe user32.dll,LockWorkStation",
        description="Lock the workstation and turn off displays",
    ),
    ActionTemplate(
        name="Display Information",
        category="Display",
        command=(
            "powershell.exe -command \"Add-Type -AssemblyName System.Windows.Forms; "
            "[System.Windows.Forms.Screen]::AllScreens | ForEach-Object { Write-Host ('Display: ' + $_.DeviceName + "
            "' Resolution: ' + $_.Bounds.Width + 'x' + $_.Bounds.Height + ' Primary: ' + $_.Primary) }\""
        ),
        description="Display information about all connected monitors",
    ),
    ActionTemplate(
        name="Switch Display Mode (Extend)",
        category="Display",
        command="DisplaySwitch.exe /extend",
        description="Switch to extend desktop across all displays",
    ),
    ActionTemplate(
        name="Switch Display Mode (Duplicate)",
        category="Display",
        command="DisplaySwitch.exe /clone",
        description="Duplicate primary display to all monitors",
    ),
    ActionTemplate(
        name="Switch Display Mode (External Only)",
        category="Display",
        command="DisplaySwitch.exe /external",
        description="Use external displays only",
    ),
    ActionTemplate(
        name="Switch Display Mode (Internal Only)",
        category="Display",
        command="DisplaySwitch.exe /internal",
        description="Use internal display only (laptops)",
    ),
    ActionTemplate(
        name="Disable Display (MultiMonitorTool)",
        category="Display",
        command=_with_tool(_MULTIMONITOR, "/disable {display_device_id}", "echo MultiMonitorTool not found in Tools folder"),
        description="Disable specific display using MultiMonitorTool",
        variables=("display_device_id",),
    ),
    ActionTemplate(
        name="Enable Display (MultiMonitorTool)",
        category="Display",
        command=_with_tool(_MULTIMONITOR, "/enable {display_device_id}", "echo MultiMonitorTool not found in Tools folder"),
        description="Enable specific display using MultiMonitorTool",
        variables=("display_device_id",),
    ),
)

PROCESS_ACTIONS = (
    ActionTemplate(
        name="Start Process",
        category="Process",
        command="powershell.exe -command \"Start-Process '{process_name}'\"",
        description="Start a specific process",
        variables=("process_name",),
    ),
    ActionTemplate(
        name="Stop Process",
        category="Process",
        command="powershell.exe -command \"Stop-Process -Name '{process_name}' -Force\"",
        description="Stop a specific process",
        variables=("process_name",),
    ),
    ActionTemplate(
        name="Kill Process by Name",
        category="Process",
        command="taskkill /F /IM {process_name}",
        description="Force kill process by name",
        variables=("process_name",),
    ),
)

SERVICE_ACTIONS = (
    ActionTemplate(
        name="Start Service",
        category="Service",
        command="powershell.exe -command \"Start-Service -Name '{service_name}'\"",
        description="Start a Windows service",
        variables=("service_name",),
    ),
    ActionTemplate(
        name="Stop Service",
        category="Service",
        command="powershell.exe -command \"Stop-Service -Name '{service_name}' -Force\"",
        description="Stop a Windows service",
        variables=("service_name",),
    ),
    ActionTemplate(
        name="Restart Service",
        category="Service",
        command="powershell.exe -command \"Restart-Service -Name '{service_name}' -Force\"",
        description="Restart a Windows service",
        variables=("service_name",),
    ),
)

SYSTEM_ACTIONS = (
    ActionTemplate(
        name="Sleep/Wait",
        category="System",
        command="timeout /t {seconds} /nobreak",
        description="Wait for specified seconds",
        variables=("seconds",),
    ),
    ActionTemplate(
        name="Show Notification",
        category="System",
        command=(
            "powershell.exe -command \"Add-Type -AssemblyName System.Windows.Forms; "
            "[System.Windows.Forms.MessageBox]::Show('{message}', 'Sunshine Script', 'OK', 'Information')\""
        ),
        description="Show a notification message",
        variables=("message",),
    ),
    ActionTemplate(
        name="Set Power Plan - High Performance",
        category="System",
        command="powercfg /s 8c5e7fda-e8bf-4a96-9a85-a6e23a8c635c",
        description="Switch to High Performance power plan",
    ),
    ActionTemplate(
        name="Set Power Plan - Balanced",
        category="System",
        command="powercfg /s 381b4222-f694-41f0-9685-ff5bb260df2e",
        description="Switch to Balanced power plan",
    ),
    ActionTemplate(
        name="Custom PowerShell",
        category="System",
        command="powershell.exe -command \"{command}\"",
        description="Execute custom PowerShell command",
        variables=("command",),
    ),
    ActionTemplate(
        name="Custom Batch",
        category="System",
        command="{command}",
        description="Execute custom batch command",
        variables=("command",),
    ),
)

CATALOG: tuple[ActionTemplate, ...] = (
    AUDIO_ACTIONS + DISPLAY_ACTIONS + PROCESS_ACTIONS + SERVICE_ACTIONS + SYSTEM_ACTIONS
)
